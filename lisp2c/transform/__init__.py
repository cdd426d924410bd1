"""
Transformation module for the Lisp to C transpiler.

This module provides the generic Lisp AST traverser, the C AST node
definitions and the transformer that maps one tree onto the other.
"""

from .ast_nodes import (
    CNode,
    Expression,
    Program,
    NumberLiteral,
    StringLiteral,
    Identifier,
    CallExpression,
    ExpressionStatement,
)
from .traverser import VisitorMethods, Visitor, children_of, traverse
from .transformer import Transformer, transform

__all__ = [
    # C AST nodes
    'CNode',
    'Expression',
    'Program',
    'NumberLiteral',
    'StringLiteral',
    'Identifier',
    'CallExpression',
    'ExpressionStatement',
    # Traversal
    'VisitorMethods',
    'Visitor',
    'children_of',
    'traverse',
    # Transformation
    'Transformer',
    'transform',
]
