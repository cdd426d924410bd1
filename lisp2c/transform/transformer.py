"""
Lisp AST to C AST transformation.

The transformer makes a single pass over the Lisp tree with the traverser.
Each visited node appends its C counterpart to the output list registered
for its parent. Output lists are tracked in a side table keyed by the
identity of the Lisp node that owns them, so the input tree is never
touched.
"""

from typing import Dict, List, Optional

from ..errors import UnexpectedRoot
from ..parser import ast_nodes as lisp
from . import ast_nodes as c
from .traverser import VisitorMethods, traverse


class Transformer:
    """
    Builds a C program tree from a Lisp program tree.

    A Transformer instance holds the output-list table for one run and is
    discarded afterwards.
    """

    def __init__(self):
        self._outputs: Dict[int, List[c.CNode]] = {}

    def output_for(self, node: Optional[lisp.ASTNode]) -> List[c.CNode]:
        """Return the list that children of node are appended to."""
        return self._outputs[id(node)]

    # =========================================================================
    # HOOKS
    # =========================================================================

    def enter_number(self, node: lisp.NumberLiteral, parent: Optional[lisp.ASTNode]) -> None:
        self.output_for(parent).append(c.NumberLiteral(node.value))

    def enter_string(self, node: lisp.StringLiteral, parent: Optional[lisp.ASTNode]) -> None:
        self.output_for(parent).append(c.StringLiteral(node.value))

    def enter_call(self, node: lisp.CallExpression, parent: Optional[lisp.ASTNode]) -> None:
        expression = c.CallExpression(c.Identifier(node.name), [])
        self._outputs[id(node)] = expression.arguments

        # Only calls used as arguments stay bare
        if isinstance(parent, lisp.CallExpression):
            self.output_for(parent).append(expression)
        else:
            self.output_for(parent).append(c.ExpressionStatement(expression))

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    def transform(self, program: lisp.Program) -> c.Program:
        """Transform a Lisp Program into a C Program."""
        if not isinstance(program, lisp.Program):
            raise UnexpectedRoot(type(program).__name__)

        result = c.Program([])
        self._outputs = {id(program): result.body}

        traverse(program, {
            lisp.NumberLiteral: VisitorMethods(enter=self.enter_number),
            lisp.StringLiteral: VisitorMethods(enter=self.enter_string),
            lisp.CallExpression: VisitorMethods(enter=self.enter_call),
        })

        self._outputs = {}
        return result


def transform(program: lisp.Program) -> c.Program:
    """Transform a Lisp Program with a fresh Transformer."""
    return Transformer().transform(program)
