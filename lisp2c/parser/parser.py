"""
Lisp parser implementation.

The Parser converts a stream of tokens from the Lexer into an Abstract
Syntax Tree (AST) representation of the Lisp source code.

The cursor is never stored on the parser. Every parsing method takes the
index of the token to start from and returns the node it built together
with the index of the first token it did not consume.
"""

from typing import List, Tuple

from ..errors import UnexpectedToken, UnexpectedEndOfInput
from ..lexer import Token, TokenType
from .ast_nodes import (
    Node,
    Program,
    NumberLiteral,
    StringLiteral,
    CallExpression,
)


class Parser:
    """
    Recursive descent parser for Lisp source code.

    Parses a stream of tokens into an AST (Abstract Syntax Tree).
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens

    def token_at(self, pos: int) -> Token:
        """Return the token at pos, failing if the stream is exhausted."""
        if pos >= len(self.tokens):
            raise UnexpectedEndOfInput(self.end_position())
        return self.tokens[pos]

    def end_position(self) -> int:
        """Source offset just past the last token."""
        if not self.tokens:
            return 0
        last = self.tokens[-1]
        width = len(last.value) + 2 if last.type == TokenType.STRING else len(last.value)
        return last.position + width

    @staticmethod
    def is_paren(token: Token, value: str) -> bool:
        return token.type == TokenType.PAREN and token.value == value

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> Program:
        """Parse the whole token stream into a Program."""
        body: List[Node] = []
        pos = 0
        while pos < len(self.tokens):
            node, pos = self.walk(pos)
            body.append(node)
        return Program(body)

    # =========================================================================
    # NODE PARSING
    # =========================================================================

    def walk(self, pos: int) -> Tuple[Node, int]:
        """Parse a single node starting at pos."""
        token = self.token_at(pos)

        if token.type == TokenType.NUMBER:
            return NumberLiteral(token.value), pos + 1

        if token.type == TokenType.STRING:
            return StringLiteral(token.value), pos + 1

        if self.is_paren(token, '('):
            return self.parse_call(pos + 1)

        raise UnexpectedToken(token.type.value, token.value, token.position)

    def parse_call(self, pos: int) -> Tuple[CallExpression, int]:
        """Parse a call whose opening paren has already been consumed."""
        # Any token kind is accepted as the callee, only its text is used
        callee = self.token_at(pos)
        if not callee.value:
            raise UnexpectedToken(callee.type.value, callee.value, callee.position)
        pos += 1

        params: List[Node] = []
        while not self.is_paren(self.token_at(pos), ')'):
            param, pos = self.walk(pos)
            params.append(param)

        return CallExpression(callee.value, params), pos + 1


def parse(tokens: List[Token]) -> Program:
    """Parse a token list with a fresh Parser."""
    return Parser(tokens).parse()
