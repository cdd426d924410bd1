"""
Lisp to C Transpiler

This package converts S-expression programs into C-like function-call
syntax, e.g. (add 2 (subtract 4 2)) becomes add(2, subtract(4, 2));

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Lisp AST nodes and parsing (Parser, Lisp AST node types)
- transform/: Traversal engine, C AST node types and the Transformer
- codegen/: Code generation (CCodeGenerator)
- errors.py: CompileError and its subclasses
- diagnostics.py: Error collection and reporting
- lisp2c.py: Pipeline entry points and CLI

Usage:
    from lisp2c import compile_source

    result = compile_source('(add 2 3)')
    if result.ok:
        print(result.output)
    else:
        print(result.error)
"""

# Re-export main classes for convenience
from .errors import (
    CompileError,
    LexError,
    UnrecognizedCharacter,
    UnterminatedString,
    ParseError,
    UnexpectedToken,
    UnexpectedEndOfInput,
    InternalCompilerError,
    UnknownNodeKind,
    UnsupportedNodeKind,
    UnexpectedRoot,
    NestingTooDeep,
    UnreadableSource,
)
from .lisp2c import (
    CompileResult,
    compile_source,
    transpile,
    LispToCTranspiler,
    Lexer,
    Parser,
    Transformer,
    CCodeGenerator,
)

__all__ = [
    'CompileError',
    'LexError',
    'UnrecognizedCharacter',
    'UnterminatedString',
    'ParseError',
    'UnexpectedToken',
    'UnexpectedEndOfInput',
    'InternalCompilerError',
    'UnknownNodeKind',
    'UnsupportedNodeKind',
    'UnexpectedRoot',
    'NestingTooDeep',
    'UnreadableSource',
    'CompileResult',
    'compile_source',
    'transpile',
    'LispToCTranspiler',
    'Lexer',
    'Parser',
    'Transformer',
    'CCodeGenerator',
]
