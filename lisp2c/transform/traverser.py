"""
Depth-first traversal of the Lisp AST.

The traverser walks a tree and calls per-node-class hooks. It builds
nothing itself: callers collect whatever they need from the hooks.

Usage:
    visitor = {
        CallExpression: VisitorMethods(enter=lambda node, parent: ...),
    }
    traverse(program, visitor)
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from ..errors import UnknownNodeKind
from ..parser.ast_nodes import (
    ASTNode,
    Program,
    NumberLiteral,
    StringLiteral,
    CallExpression,
)


Hook = Callable[[ASTNode, Optional[ASTNode]], None]


@dataclass
class VisitorMethods:
    """Hooks run before (enter) and after (exit) a node's children."""
    enter: Optional[Hook] = None
    exit: Optional[Hook] = None


Visitor = Dict[Type[ASTNode], VisitorMethods]


def children_of(node: ASTNode) -> List[ASTNode]:
    """Return the children of node in declared order."""
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CallExpression):
        return node.params
    if isinstance(node, (NumberLiteral, StringLiteral)):
        return []
    raise UnknownNodeKind(type(node).__name__)


def traverse(root: ASTNode, visitor: Visitor) -> None:
    """Walk root depth-first, calling enter before and exit after each subtree."""

    def traverse_node(node: ASTNode, parent: Optional[ASTNode]) -> None:
        children = children_of(node)
        methods = visitor.get(type(node))

        if methods and methods.enter:
            methods.enter(node, parent)

        for child in children:
            traverse_node(child, node)

        if methods and methods.exit:
            methods.exit(node, parent)

    traverse_node(root, None)
