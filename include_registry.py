"""
include_registry.py
The #include block of a generated header: headers the user asked for, plus the
standard library headers the emitted support code turned out to need.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional


class IncludeKind(Enum):
    QUOTED = "quoted"        # #include "path"
    BRACKETED = "bracketed"  # #include <path>


@dataclass(frozen=True)
class Include:
    """
    A header to #include.

    The path is not parsed and need not exist; it goes into the generated C++
    code as an #include line.
    """
    path: str
    kind: IncludeKind = IncludeKind.QUOTED


class Capability(Enum):
    """
    Standard library headers the support code may need.
    Declaration order is render order.
    """
    ARRAY = ("array", None)
    CSTDDEF = ("cstddef", None)
    CSTDINT = ("cstdint", None)
    CSTRING = ("cstring", None)
    EXCEPTION = ("exception", None)
    MEMORY = ("memory", None)
    NEW = ("new", None)
    STRING = ("string", None)
    TYPE_TRAITS = ("type_traits", None)
    UTILITY = ("utility", None)
    VECTOR = ("vector", None)
    BASETSD = ("basetsd.h", "defined(_WIN32)")

    def __init__(self, header: str, condition: Optional[str]):
        self.header = header
        self.condition = condition


class IncludeRegistry:
    def __init__(self):
        self.custom: List[Include] = []
        self.flags: Dict[Capability, bool] = {cap: False for cap in Capability}

    def insert(self, include: Include) -> None:
        # Repeated includes are harmless in C++, so no dedup
        self.custom.append(include)

    def extend(self, includes: Iterable[Include]) -> None:
        self.custom.extend(includes)

    def require(self, capability: Capability) -> None:
        self.flags[capability] = True

    def is_required(self, capability: Capability) -> bool:
        return self.flags[capability]

    def render(self) -> str:
        lines = []
        for include in self.custom:
            if include.kind is IncludeKind.QUOTED:
                lines.append(f'#include "{escape_default(include.path)}"')
            else:
                lines.append(f'#include <{include.path}>')
        for cap in Capability:
            if not self.flags[cap]:
                continue
            if cap.condition:
                lines.append(f'#if {cap.condition}')
                lines.append(f'#include <{cap.header}>')
                lines.append('#endif')
            else:
                lines.append(f'#include <{cap.header}>')
        return ''.join(line + '\n' for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncludeRegistry):
            return NotImplemented
        return self.custom == other.custom and self.flags == other.flags


_ESCAPES = {
    '\t': '\\t',
    '\r': '\\r',
    '\n': '\\n',
    '\\': '\\\\',
    '\'': '\\\'',
    '"': '\\"',
}


def escape_default(text: str) -> str:
    """
    Escape a string for a C/C++ string literal context: the usual
    backslash escapes, printable ASCII as-is, everything else as \\u{hex}.
    """
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ' ' <= ch <= '~':
            out.append(ch)
        else:
            out.append(f'\\u{{{ord(ch):x}}}')
    return ''.join(out)
