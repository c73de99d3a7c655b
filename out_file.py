"""
out_file.py
Text buffer for a generated file.
"""
from io import StringIO


class OutFile:
    """
    Accumulates generated text. Writers call next_section() before each
    logically separate chunk; the chunks end up separated by one blank line.
    """

    def __init__(self):
        self._buffer = StringIO()
        self._section_pending = False
        self._at_line_start = True

    def next_section(self) -> None:
        self._section_pending = True

    def write(self, text: str) -> None:
        if not text:
            return
        if self._section_pending:
            if not self.is_empty():
                if not self._at_line_start:
                    self._buffer.write("\n")
                self._buffer.write("\n")
            self._section_pending = False
        self._buffer.write(text)
        self._at_line_start = text.endswith("\n")

    def writeln(self, line: str = "") -> None:
        self.write(line + "\n")

    def is_empty(self) -> bool:
        return self._buffer.tell() == 0

    def content(self) -> str:
        return self._buffer.getvalue()
