"""
Parser module for the Lisp to C transpiler.

This module provides the source AST node definitions and the parser
implementation.
"""

from .ast_nodes import (
    ASTNode,
    Node,
    Program,
    NumberLiteral,
    StringLiteral,
    CallExpression,
)
from .parser import Parser, parse

__all__ = [
    # Nodes
    'ASTNode',
    'Node',
    'Program',
    'NumberLiteral',
    'StringLiteral',
    'CallExpression',
    # Parser
    'Parser',
    'parse',
]
