"""
Lexer module for the Lisp to C transpiler.

This module provides tokenization of S-expression source code.
"""

from .tokens import TokenType, Token, PARENS, DIGITS, LETTERS, QUOTE
from .lexer import Lexer, tokenize

__all__ = [
    'TokenType',
    'Token',
    'PARENS',
    'DIGITS',
    'LETTERS',
    'QUOTE',
    'Lexer',
    'tokenize',
]
