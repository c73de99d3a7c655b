"""
qualified_name.py
Parsing of namespaced identifier paths such as `a::b::c`, written either as
bare tokens or as the contents of a string literal.
"""
import re
from typing import List, Union

from errors import MalformedPathError
from tokenizer import TokenStream

SEGMENT_TOKENS = ('IDENT', 'RAW_IDENT')
STRING_TOKENS = ('STRING', 'RAW_STRING')


class QualifiedName:
    def __init__(self, segments: List[str]):
        self.segments: List[str] = segments

    @staticmethod
    def parse_unquoted(stream: TokenStream) -> 'QualifiedName':
        """
        Consume `segment (:: segment)*` from the front of the stream.
        Parsing stops at the first segment not followed by `::`; the rest of
        the stream is left for the caller.
        """
        segments = []
        trailing_sep = True
        while trailing_sep and stream.peek_type() in SEGMENT_TOKENS:
            segments.append(_segment_name(stream.next()))
            trailing_sep = stream.peek_type() == 'PATH_SEP'
            if trailing_sep:
                stream.next()
        if not segments:
            raise stream.error("expected path")
        elif trailing_sep:
            raise stream.error("expected path segment")
        return QualifiedName(segments)

    @staticmethod
    def parse_quoted_or_unquoted(stream: TokenStream) -> 'QualifiedName':
        """
        Like parse_unquoted, except that a string literal in front of the
        stream is unpacked and its contents parsed as an unquoted path.
        """
        if stream.peek_type() in STRING_TOKENS:
            lit = stream.next()
            try:
                contents = TokenStream(_string_value(lit), lit.line, lit.column)
                name = QualifiedName.parse_unquoted(contents)
                if contents.has_tokens():
                    raise contents.error("unexpected token after path")
            except MalformedPathError as e:
                # Report against the literal, the only location the author can see
                raise MalformedPathError(e.message, lit.line, lit.column) from e
            return name
        return QualifiedName.parse_unquoted(stream)

    @staticmethod
    def parse_str(text: str, quoted: bool = True) -> 'QualifiedName':
        """Parse a complete piece of text as one qualified name."""
        stream = TokenStream(text)
        if quoted:
            name = QualifiedName.parse_quoted_or_unquoted(stream)
        else:
            name = QualifiedName.parse_unquoted(stream)
        if stream.has_tokens():
            raise stream.error("unexpected token after path")
        return name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, QualifiedName) and self.segments == other.segments

    def __hash__(self) -> int:
        return hash(tuple(self.segments))

    def __str__(self) -> str:
        return '::'.join(self.segments)

    def __repr__(self) -> str:
        return f"QualifiedName({self.segments!r})"


def _segment_name(token) -> str:
    # r#type names the identifier `type`
    value = str(token)
    if token.type == 'RAW_IDENT':
        return value[2:]
    return value


_SIMPLE_ESCAPES = {
    'n': '\n',
    'r': '\r',
    't': '\t',
    '\\': '\\',
    '0': '\0',
    '\'': '\'',
    '"': '"',
}

_ESCAPE = re.compile(r'\\(?:x([0-9a-fA-F]{2})|u\{([0-9a-fA-F]{1,6})\}|\r?\n[ \t\r\n]*|(.))', re.S)


def _string_value(token) -> str:
    """Contents of a string literal token, escapes decoded."""
    text = str(token)
    if token.type == 'RAW_STRING':
        # r"..." / r#"..."#: no escapes, only the delimiters come off
        hashes = len(text) - len(text[1:].lstrip('#')) - 1
        return text[2 + hashes:len(text) - 1 - hashes]

    def decode(match):
        hex_byte, code_point, other = match.groups()
        if hex_byte is not None:
            value = int(hex_byte, 16)
            if value > 0x7F:
                raise MalformedPathError(f"out of range hex escape \\x{hex_byte}", token.line, token.column)
            return chr(value)
        if code_point is not None:
            value = int(code_point, 16)
            if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                raise MalformedPathError(f"invalid unicode escape \\u{{{code_point}}}", token.line, token.column)
            return chr(value)
        if other is None:
            # Line continuation swallows the newline and following whitespace
            return ''
        if other in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[other]
        raise MalformedPathError(f"unknown character escape \\{other}", token.line, token.column)

    return _ESCAPE.sub(decode, text[1:-1])


def parse_qualified_name(source: Union[str, TokenStream], quoted: bool = True) -> QualifiedName:
    if isinstance(source, TokenStream):
        if quoted:
            return QualifiedName.parse_quoted_or_unquoted(source)
        return QualifiedName.parse_unquoted(source)
    return QualifiedName.parse_str(source, quoted)
