"""
guarded_sections.py
Slices include-guarded sections out of the canonical support header.

A guard G is written in the canonical header as

    #ifndef G
    #define G
    ...
    #endif // G

and may cover several separate blocks, which are emitted together, in text
order, under a single guard.
"""
from typing import List, Optional

from errors import MissingGuardError
from out_file import OutFile
from support_header import HEADER


def write_guarded_section(out: OutFile, needed: bool, guard: str, header: str = HEADER) -> None:
    """
    Write every block guarded by `guard` to `out`, wrapped in one guard triple.

    The guard is looked up even when it is not needed; a name the header
    does not know raises MissingGuardError either way.
    """
    ifndef = f"#ifndef {guard}"
    define = f"#define {guard}"
    endif = f"#endif // {guard}"

    offset = 0
    while True:
        begin = find_line(header, offset, ifndef)
        end = find_line(header, offset, endif)
        if begin is not None and end is not None:
            if not needed:
                return
            if end < begin:
                raise MissingGuardError(guard, "unbalanced guard in support header")
            out.next_section()
            if offset == 0:
                out.writeln(ifndef)
                out.writeln(define)
            for line in _lines(header[begin + len(ifndef):end].strip()):
                if line != define and not line.lstrip().startswith("//"):
                    out.writeln(line)
            offset = end + len(endif)
        elif offset == 0:
            raise MissingGuardError(guard)
        else:
            out.writeln(endif)
            return


def extract(canonical_text: str, guard_name: str, needed: bool) -> Optional[str]:
    """Return the section for `guard_name`, or None when it isn't needed."""
    out = OutFile()
    write_guarded_section(out, needed, guard_name, canonical_text)
    if out.is_empty():
        return None
    return out.content()


def find_line(text: str, offset: int, line: str) -> Optional[int]:
    """
    Index of the first occurrence of `line` at or after `offset` that makes
    up a whole line of `text`, or None.
    """
    while True:
        offset = text.find(line, offset)
        if offset == -1:
            return None
        rest = offset + len(line)
        at_line_start = offset == 0 or text[offset - 1] in "\r\n"
        if at_line_start and text.startswith(("\n", "\r"), rest):
            return offset
        offset = rest


def _lines(text: str) -> List[str]:
    if not text:
        return []
    lines = text.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]
