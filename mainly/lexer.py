"""Lexer for Mainly.

The lexer is pull-based: every call to :meth:`Lexer.next_token` matches one
token at the current cursor position using a combined regular expression of
named groups, advances the cursor past it and returns a :class:`Token`
containing its type, value and source line number. The cursor only ever
moves forward.

Tokens cover number literals, the ``print``/``printcal`` keywords, quoted
text and the four arithmetic operators. Whitespace is skipped, with newlines
counted so tokens carry accurate line numbers.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from mainly.exceptions import UnexpectedCharacterError, UnknownKeywordError


class Token:
    """
    Represents a lexical token with a type and value.
    """
    __slots__ = ('type', 'value', 'line')

    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The source line the token starts on.
        """
        object.__setattr__(self, 'type', type_)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'line', line)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable; cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Token is immutable; cannot delete '{name}'")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


KEYWORDS: dict[str, str] = {
    'print': 'PRINT',
    'printcal': 'PRINTCAL',
}

token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    r'[0-9]+(?:\.[0-9]*)?|\.[0-9]*'),
    ('TEXT',      r'"[^"]*"?'),

    # Keywords (longest run of letters/underscores, looked up in KEYWORDS)
    ('WORD',      r'[^\W\d]+'),

    # Arithmetic operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    # Whitespace other than the \x1c-\x1f information separators
    ('SKIP',      r'[^\S\n\x1c-\x1f]+'),
    ('MISMATCH',  r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


class Lexer:
    """
    Forward-only token stream over a program string.
    """

    def __init__(self, code: str, file: str = '<string>'):
        self.code = code
        self.file = file
        self.position = 0
        self.line = 1
        self._lookahead: Token | None = None

    def remaining(self) -> int:
        """
        Return the number of characters not yet consumed.

        A token held by :meth:`peek_token` counts as consumed.
        """
        return len(self.code) - self.position

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.
        """
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def next_token(self) -> Token:
        """
        Consume and return the next token.

        Returns:
            Token: The next token, or an ``EOF`` token once the input is
            exhausted. Further calls keep returning ``EOF``.

        Raises:
            UnexpectedCharacterError: If a character cannot start a token.
            UnknownKeywordError: If a word is not a known keyword.
        """
        if self._lookahead is not None:
            tok, self._lookahead = self._lookahead, None
            return tok
        return self._scan()

    def __iter__(self):
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == 'EOF':
                return

    def _scan(self) -> Token:
        while self.position < len(self.code):
            match_obj = tok_regex.match(self.code, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            line = self.line
            self.position = match_obj.end()

            if kind == 'NEWLINE':
                self.line += 1
                continue
            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                raise UnexpectedCharacterError(value, line, self.file)

            if kind == 'NUMBER':
                # A lone '.' reads as an empty literal
                return Token('NUMBER', float(value) if value != '.' else 0.0, line)
            if kind == 'TEXT':
                # Unterminated text runs to the end of input
                text = value[1:-1] if len(value) > 1 and value.endswith('"') else value[1:]
                self.line += text.count('\n')
                return Token('TEXT', text, line)
            if kind == 'WORD':
                if value not in KEYWORDS:
                    raise UnknownKeywordError(value, line, self.file)
                return Token(KEYWORDS[value], value, line)
            return Token(kind, value, line)

        return Token('EOF', None, self.line)


def tokenize(code: str, file: str = '<string>') -> list[Token]:
    """
    Convert a string of source code into a list of tokens ending in ``EOF``.

    Raises:
        UnexpectedCharacterError: If an unexpected character is encountered.
        UnknownKeywordError: If an unknown word is encountered.
    """
    return list(Lexer(code, file))
