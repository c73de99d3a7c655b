"""
errors.py
The two failure kinds of support-header generation.
"""


class MissingGuardError(RuntimeError):
    """
    A requested guard is not present in the canonical support header.

    This is never a runtime condition: it means the canonical header and the
    guard names asked of it have drifted apart, so generation stops.
    """

    def __init__(self, guard: str, detail: str = "not found in support header"):
        self.guard = guard
        super().__init__(f"{detail}: {guard}")


class MalformedPathError(ValueError):
    """A qualified name failed to parse. Carries the offending source location."""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"Line {line}, column {column}: {message}")
