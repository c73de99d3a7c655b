
import sys
import os
from tempfile import TemporaryDirectory
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

BRIDGEGEN_ENV_VARS = ('BRIDGEGEN_FEATURES', 'BRIDGEGEN_OUTPUT', 'BRIDGEGEN_NAMESPACE', 'BRIDGEGEN_VERBOSE')


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure no BRIDGEGEN_* override leaks in from the calling shell."""
    for name in BRIDGEGEN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
