"""
Token definitions for the Lisp lexer.

This module contains the TokenType enum, the Token dataclass and the
character classes the lexer recognizes.
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Enumeration of all token types recognized by the Lisp lexer."""
    PAREN = 'paren'
    NUMBER = 'number'
    STRING = 'string'
    NAME = 'name'


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    position: int = 0
    line: int = 1
    column: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'type': self.type.value,
            'value': self.value,
            'line': self.line,
            'column': self.column,
        }

    def __str__(self) -> str:
        return f'{self.type.value} {self.value}'


# Character classes
PARENS = '()'
DIGITS = '0123456789'
LETTERS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
QUOTE = '"'
