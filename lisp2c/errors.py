"""
Error types raised by the compiler pipeline.

Every failure the pipeline can report derives from CompileError. Errors are
raised at the first problem found and never recovered from internally.
"""

from typing import Optional


class CompileError(Exception):
    """Base class for all compiler errors."""

    code = 'E000'

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is not None:
            return f'{self.message} (at position {self.position})'
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class UnreadableSource(CompileError):
    """A source file could not be read or decoded."""

    code = 'E008'

    def __init__(self, file_path: str, reason: str):
        super().__init__(f'Cannot read {file_path}: {reason}')
        self.file_path = file_path
        self.reason = reason


class NestingTooDeep(CompileError):
    """Calls are nested deeper than the recursive stages can follow."""

    code = 'E007'

    def __init__(self):
        super().__init__('Expressions are nested too deeply')


# =============================================================================
# LEXER ERRORS
# =============================================================================

class LexError(CompileError):
    """Raised when the source text cannot be tokenized."""
    pass


class UnrecognizedCharacter(LexError):
    """A character outside every known token class."""

    code = 'E001'

    def __init__(self, char: str, position: int):
        super().__init__(f'Character {char!r} not identified', position)
        self.char = char


class UnterminatedString(LexError):
    """End of input reached inside an open string literal."""

    code = 'E002'

    def __init__(self, position: int):
        super().__init__('Unterminated string literal', position)


# =============================================================================
# PARSER ERRORS
# =============================================================================

class ParseError(CompileError, SyntaxError):
    """Raised when the token stream does not match the grammar."""
    pass


class UnexpectedToken(ParseError):
    """A token that cannot start a node."""

    code = 'E003'

    def __init__(self, kind: str, text: str, position: int):
        super().__init__(f'Token not identified: {kind} {text!r}', position)
        self.kind = kind
        self.text = text


class UnexpectedEndOfInput(ParseError):
    """The parser needed another token but the stream was exhausted."""

    code = 'E004'

    def __init__(self, position: Optional[int] = None):
        super().__init__('Unexpected end of input', position)


# =============================================================================
# INTERNAL ERRORS
# =============================================================================

class InternalCompilerError(CompileError):
    """A malformed tree reached a later stage. Indicates a compiler defect."""
    pass


class UnknownNodeKind(InternalCompilerError):
    """The traverser met a node class it does not know how to walk."""

    code = 'E005'

    def __init__(self, kind: str):
        super().__init__(f'Unknown node kind: {kind}')
        self.kind = kind


class UnexpectedRoot(InternalCompilerError):
    """The transformer was handed a tree whose root is not a Program."""

    code = 'E009'

    def __init__(self, kind: str):
        super().__init__(f'Transform root must be a Program, got {kind}')
        self.kind = kind


class UnsupportedNodeKind(InternalCompilerError):
    """The code generator met a node class it cannot print."""

    code = 'E006'

    def __init__(self, kind: str):
        super().__init__(f'Unsupported node kind: {kind}')
        self.kind = kind
