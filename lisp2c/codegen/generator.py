"""
C code generator.

Prints a C AST back out as text by recursive structural printing. The
generator keeps no state between calls.
"""

from ..errors import UnsupportedNodeKind
from ..transform.ast_nodes import (
    CNode,
    Program,
    NumberLiteral,
    StringLiteral,
    Identifier,
    CallExpression,
    ExpressionStatement,
)


class CCodeGenerator:
    """
    Generates C-like call syntax from a C AST.

    Each node class has a generate_* method; generate() dispatches on
    the node class and fails on anything outside the known set.
    """

    STATEMENT_SEPARATOR = '\n'
    ARGUMENT_SEPARATOR = ', '

    def generate(self, node: CNode) -> str:
        """Generate code for any C AST node."""
        if isinstance(node, Program):
            return self.generate_program(node)
        if isinstance(node, ExpressionStatement):
            return self.generate_expression_statement(node)
        if isinstance(node, CallExpression):
            return self.generate_call(node)
        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, NumberLiteral):
            return node.value
        if isinstance(node, StringLiteral):
            # Embedded quotes are not escaped, the lexer never unescapes them either
            return f'"{node.value}"'
        raise UnsupportedNodeKind(type(node).__name__)

    def generate_program(self, node: Program) -> str:
        return self.STATEMENT_SEPARATOR.join(self.generate(child) for child in node.body)

    def generate_expression_statement(self, node: ExpressionStatement) -> str:
        return f'{self.generate(node.expression)};'

    def generate_call(self, node: CallExpression) -> str:
        args = self.ARGUMENT_SEPARATOR.join(self.generate(arg) for arg in node.arguments)
        return f'{self.generate(node.callee)}({args})'


def generate(node: CNode) -> str:
    """Generate code for node with a fresh CCodeGenerator."""
    return CCodeGenerator().generate(node)
