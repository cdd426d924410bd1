"""
Lexer implementation for Lisp source code.

The Lexer tokenizes S-expression source into a flat stream of tokens
that can be consumed by the parser.
"""

from typing import List

from ..errors import UnrecognizedCharacter, UnterminatedString
from .tokens import Token, TokenType, PARENS, DIGITS, LETTERS, QUOTE


class Lexer:
    """
    Lexer for Lisp source code.

    Converts source text into a list of tokens for parsing. The source is
    read left to right with a single cursor and no backtracking.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos >= len(self.source):
            return ''
        return self.source[self.pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def read_run(self, charset: str) -> str:
        """Read the maximal run of characters belonging to charset."""
        result = ''
        while self.peek() and self.peek() in charset:
            result += self.advance()
        return result

    def read_string(self) -> str:
        """Read a string literal, returning only the characters between the quotes."""
        start = self.pos
        self.advance()  # opening quote
        result = ''
        while self.peek() != QUOTE:
            if not self.peek():
                raise UnterminatedString(start)
            result += self.advance()
        self.advance()  # closing quote
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects in source order. Empty for empty input.

        Raises:
            UnrecognizedCharacter: on a character outside every token class.
            UnterminatedString: when the input ends inside a string literal.
        """
        while self.pos < len(self.source):
            start, line, column = self.pos, self.line, self.column
            ch = self.peek()

            if ch in PARENS:
                self.advance()
                self.tokens.append(Token(TokenType.PAREN, ch, start, line, column))
                continue

            if ch.isspace():
                self.advance()
                continue

            if ch in DIGITS:
                value = self.read_run(DIGITS)
                self.tokens.append(Token(TokenType.NUMBER, value, start, line, column))
                continue

            if ch == QUOTE:
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING, value, start, line, column))
                continue

            if ch in LETTERS:
                value = self.read_run(LETTERS)
                self.tokens.append(Token(TokenType.NAME, value, start, line, column))
                continue

            raise UnrecognizedCharacter(ch, start)

        return self.tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize source text with a fresh Lexer."""
    return Lexer(source).tokenize()
