"""
AST node definitions for the generated C-like code.

The transformer builds these nodes and the code generator prints them.
Unlike the Lisp tree, calls split the callee out into an Identifier and
top-level calls are wrapped in an ExpressionStatement.
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class CNode:
    """Base class for all target AST nodes."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        raise NotImplementedError


@dataclass
class NumberLiteral(CNode):
    value: str

    def to_dict(self) -> dict:
        return {'type': 'NumberLiteral', 'value': self.value}


@dataclass
class StringLiteral(CNode):
    value: str

    def to_dict(self) -> dict:
        return {'type': 'StringLiteral', 'value': self.value}


@dataclass
class Identifier(CNode):
    """The callee name lifted out of a Lisp call."""
    name: str

    def to_dict(self) -> dict:
        return {'type': 'Identifier', 'name': self.name}


@dataclass
class CallExpression(CNode):
    """Represents callee(arg, ...)."""
    callee: Identifier
    arguments: List['Expression'] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'type': 'CallExpression',
            'callee': self.callee.to_dict(),
            'arguments': [arg.to_dict() for arg in self.arguments],
        }


@dataclass
class ExpressionStatement(CNode):
    """A top-level call terminated by a semicolon."""
    expression: CallExpression

    def to_dict(self) -> dict:
        return {'type': 'ExpressionStatement', 'expression': self.expression.to_dict()}


@dataclass
class Program(CNode):
    body: List[CNode] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'type': 'Program',
            'body': [statement.to_dict() for statement in self.body],
        }


Expression = Union[NumberLiteral, StringLiteral, CallExpression]
