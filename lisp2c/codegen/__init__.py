"""
Code generation module for the Lisp to C transpiler.

This module provides C code generation from C AST nodes.
"""

from .generator import CCodeGenerator, generate

__all__ = [
    'CCodeGenerator',
    'generate',
]
