# tokenizer.py
# Token stream for bridge declaration attributes, backed by a lark lexer.

from typing import List, Optional

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from errors import MalformedPathError


grammar = r"""
    start: _token*
    _token: RAW_IDENT | IDENT | PATH_SEP | RAW_STRING | STRING | NUMBER | PUNCT

    RAW_STRING.3: /r"[^"]*"/ | /r#"[\s\S]*?"#/ | /r##"[\s\S]*?"##/
    RAW_IDENT.2: /r#(?!\d)\w+/
    IDENT: /(?!\d)\w+/
    PATH_SEP.2: "::"
    STRING: /"(\\[\s\S]|[^"\\])*"/
    NUMBER: /[0-9]+/
    PUNCT: /[#=,;:<>()\[\]{}.&*]/

    %import common.WS
    %ignore WS
"""

lexer = Lark(
    grammar,
    start='start',
    parser='lalr',
    lexer='basic',
)


class TokenStream:
    """
    Cursor over the tokens of a piece of source text.
    Parsers consume from the front and leave whatever they don't understand
    for the caller.
    """

    def __init__(self, text: str, line: int = 1, column: int = 1):
        self.text = text
        # Location reported when the stream is exhausted
        self.end_line = line
        self.end_column = column
        self.tokens: List[Token] = []
        self.pos = 0
        self._tokenize()

    def _tokenize(self):
        try:
            for token in lexer.lex(self.text):
                self.tokens.append(token)
        except UnexpectedCharacters as e:
            raise MalformedPathError(f"unexpected character {e.char!r}", e.line, e.column)
        if self.tokens:
            last = self.tokens[-1]
            self.end_line = last.end_line
            self.end_column = last.end_column

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def peek_type(self) -> Optional[str]:
        token = self.peek()
        return token.type if token is not None else None

    def next(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def expect(self, token_type: str) -> Token:
        token = self.peek()
        if token is None or token.type != token_type:
            raise self.error(f"expected {token_type}")
        self.pos += 1
        return token

    def has_tokens(self) -> bool:
        return self.pos < len(self.tokens)

    def location(self):
        """(line, column) of the next token, or of the end of input."""
        token = self.peek()
        if token is None:
            return self.end_line, self.end_column
        return token.line, token.column

    def error(self, message: str) -> MalformedPathError:
        line, column = self.location()
        return MalformedPathError(message, line, column)
