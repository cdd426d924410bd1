"""
Diagnostic system for the transpiler.

Collects and reports compile errors and informational notes gathered
while transpiling one or more sources, so a directory run can report
every failing file instead of stopping at the first one.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import CompileError


class DiagnosticSeverity(Enum):
    """Severity levels for transpiler diagnostics."""
    ERROR = 'error'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        location = self.file_path or '<input>'
        if self.line:
            location = f'{location}:{self.line}:{self.column}'
        return f'[{self.severity.value}] {location}: {self.message} ({self.code})'


def line_and_column(source: str, position: int) -> Tuple[int, int]:
    """Convert a 0-based source offset into a 1-based (line, column) pair."""
    prefix = source[:position]
    line = prefix.count('\n') + 1
    column = position - (prefix.rfind('\n') + 1) + 1
    return line, column


class CompilerDiagnostics:
    """
    Collects compiler diagnostics across transpiler runs.

    Usage:
        diag = CompilerDiagnostics()
        try:
            transpile(source)
        except CompileError as e:
            diag.error_from_exception(e, source, 'main.lisp')
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        """Get only error-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # RECORDING
    # =========================================================================

    def error_from_exception(
        self,
        error: CompileError,
        source: str = '',
        file_path: str = '',
    ) -> Diagnostic:
        """Record a compile error, resolving its position against source."""
        line = column = None
        if error.position is not None:
            line, column = line_and_column(source, error.position)
        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code=error.code,
            message=error.message,
            file_path=file_path,
            line=line,
            column=column,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def info_empty_program(self, file_path: str = '') -> None:
        """Note that a source produced no statements."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='Source contains no expressions; generated output is empty.',
            file_path=file_path,
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        errors = self.errors
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if errors:
            print(f'Compile errors ({len(errors)}):', file=file)
            for d in errors:
                print(f'  {d}', file=file)

        if infos and self._verbose:
            print(f'Compiler info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all error diagnostics."""
        errors = self.errors
        if not errors:
            return 'No compile errors.'

        by_code: Dict[str, int] = {}
        for d in errors:
            by_code[d.code] = by_code.get(d.code, 0) + 1

        parts = [f'{count} {code}' for code, count in sorted(by_code.items())]
        return f'Compile errors: {", ".join(parts)}'
