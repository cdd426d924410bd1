"""
AST node definitions for Lisp parsing.

This module contains the dataclasses representing nodes in the Abstract
Syntax Tree (AST) produced by the Lisp parser. The set of node classes is
closed: the traverser and transformer handle exactly these four.
"""

from dataclasses import dataclass, field
from typing import List, Union


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass(frozen=True)
class ASTNode:
    """Base class for all source AST nodes."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        raise NotImplementedError


# =============================================================================
# LITERALS
# =============================================================================

@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    """Represents a run of decimal digits, kept as text."""
    value: str

    def to_dict(self) -> dict:
        return {'type': 'NumberLiteral', 'value': self.value}


@dataclass(frozen=True)
class StringLiteral(ASTNode):
    """Represents the raw characters between a pair of double quotes."""
    value: str

    def to_dict(self) -> dict:
        return {'type': 'StringLiteral', 'value': self.value}


# =============================================================================
# CALLS AND PROGRAM
# =============================================================================

@dataclass(frozen=True)
class CallExpression(ASTNode):
    """Represents a prefix call such as (add 1 2)."""
    name: str
    params: List['Node'] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'type': 'CallExpression',
            'name': self.name,
            'params': [param.to_dict() for param in self.params],
        }


@dataclass(frozen=True)
class Program(ASTNode):
    """Root node holding the top-level expressions in source order."""
    body: List['Node'] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'type': 'Program',
            'body': [node.to_dict() for node in self.body],
        }


Node = Union[NumberLiteral, StringLiteral, CallExpression, Program]
