#!/usr/bin/env python3
"""
Lisp to C Transpiler

Converts S-expression programs such as (add 2 (subtract 4 2)) into C-like
function-call syntax such as add(2, subtract(4, 2));

The pipeline has five stages, each in its own package:
- lexer: Tokenization (tokens.py, lexer.py)
- parser: Lisp AST nodes and parsing (ast_nodes.py, parser.py)
- transform: Traversal engine, C AST nodes and the Lisp -> C transformer
- codegen: C code generation (generator.py)

Usage:
    python -m lisp2c                      # interactive prompt
    python -m lisp2c -e '(add 1 2)'
    python -m lisp2c src/ -o c-output
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .codegen import CCodeGenerator
from .diagnostics import CompilerDiagnostics
from .errors import CompileError, NestingTooDeep, UnreadableSource
from .lexer import Lexer
from .parser import Parser
from .transform import Transformer


@dataclass
class CompileResult:
    """Outcome of one compilation: either output text or the error that stopped it."""
    output: Optional[str] = None
    error: Optional[CompileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the output, re-raising the error if compilation failed."""
        if self.error is not None:
            raise self.error
        return self.output


def transpile(source: str) -> str:
    """Run the full pipeline on source, raising CompileError on failure."""
    try:
        tokens = Lexer(source).tokenize()
        ast = Parser(tokens).parse()
        c_ast = Transformer().transform(ast)
        return CCodeGenerator().generate(c_ast)
    except RecursionError:
        raise NestingTooDeep() from None


def compile_source(source: str) -> CompileResult:
    """Run the full pipeline on source and report the outcome without raising."""
    try:
        return CompileResult(output=transpile(source))
    except CompileError as e:
        return CompileResult(error=e)


class LispToCTranspiler:
    """Main transpiler class that orchestrates the conversion process."""

    def __init__(
        self,
        source_dir: str = '.',
        output_dir: str = './c-output',
        extension: str = '.c',
        diagnostics: Optional[CompilerDiagnostics] = None,
        dump_tokens: bool = False,
        dump_ast: bool = False,
        dump_c_ast: bool = False,
        dump_file=None,
    ):
        self.source_dir = Path(source_dir)
        self.output_dir = Path(output_dir)
        self.extension = extension
        self.diagnostics = diagnostics or CompilerDiagnostics()
        self.dump_tokens = dump_tokens
        self.dump_ast = dump_ast
        self.dump_c_ast = dump_c_ast
        self.dump_file = dump_file

    def _dump(self, title: str, data) -> None:
        """Write one pipeline stage as JSON to the dump stream."""
        out = self.dump_file if self.dump_file is not None else sys.stderr
        print(f'=== {title} ===', file=out)
        print(json.dumps(data, indent=2), file=out)

    def transpile_source(self, source: str, file_path: str = '') -> str:
        """Transpile Lisp source text to C, dumping intermediate stages if enabled."""
        try:
            return self._run_stages(source, file_path)
        except RecursionError:
            raise NestingTooDeep() from None

    def _run_stages(self, source: str, file_path: str) -> str:
        tokens = Lexer(source).tokenize()
        if self.dump_tokens:
            self._dump('Tokens', [token.to_dict() for token in tokens])

        ast = Parser(tokens).parse()
        if self.dump_ast:
            self._dump('Lisp AST', ast.to_dict())
        if not ast.body:
            self.diagnostics.info_empty_program(file_path)

        c_ast = Transformer().transform(ast)
        if self.dump_c_ast:
            self._dump('C AST', c_ast.to_dict())

        return CCodeGenerator().generate(c_ast)

    def transpile_file(self, filepath: str) -> str:
        """Transpile a single Lisp file to C."""
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            error = UnreadableSource(filepath, str(e))
            self.diagnostics.error_from_exception(error, file_path=filepath)
            raise error from e
        try:
            return self.transpile_source(source, filepath)
        except CompileError as e:
            self.diagnostics.error_from_exception(e, source, filepath)
            raise

    def output_path_for(self, filepath: Path) -> Path:
        """Map a source file onto its output path, mirroring the source tree."""
        try:
            rel_path = filepath.relative_to(self.source_dir)
        except ValueError:
            rel_path = Path(filepath.name)
        return self.output_dir / rel_path.with_suffix(self.extension)

    def transpile_directory(self, pattern: str = '**/*.lisp') -> Dict[str, str]:
        """Transpile all Lisp files matching the pattern, skipping files that fail."""
        results = {}
        for lisp_file in sorted(self.source_dir.glob(pattern)):
            try:
                c_code = self.transpile_file(str(lisp_file))
            except CompileError:
                continue
            results[str(self.output_path_for(lisp_file))] = c_code
        return results

    def write_output(self, results: Dict[str, str]) -> None:
        """Write transpiled C files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                f.write(content + '\n')
            print(f"Written: {filepath}")


# =============================================================================
# CLI INTERFACE
# =============================================================================

def run_interactive(transpiler: LispToCTranspiler) -> int:
    """Prompt for one line of Lisp, then echo it along with the generated C."""
    try:
        source = input('Enter Lisp code: ')
    except EOFError:
        print('Error: No input provided', file=sys.stderr)
        return 1

    try:
        output = transpiler.transpile_source(source)
    except CompileError as e:
        transpiler.diagnostics.error_from_exception(e, source)
        transpiler.diagnostics.print_summary()
        return 1

    print(source)
    print(output)
    transpiler.diagnostics.print_summary()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Lisp to C Transpiler')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('input', nargs='?', help='Input Lisp file or directory (prompt if omitted)')
    source.add_argument('-e', '--expr', help='Transpile this Lisp expression and print the result')
    parser.add_argument('-o', '--output', default='c-output', help='Output directory')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('--dump-tokens', action='store_true', help='Dump tokens as JSON to stderr')
    parser.add_argument('--dump-ast', action='store_true', help='Dump the Lisp AST as JSON to stderr')
    parser.add_argument('--dump-c-ast', action='store_true', help='Dump the C AST as JSON to stderr')
    parser.add_argument('-v', '--verbose', action='store_true', help='Report informational diagnostics')

    args = parser.parse_args(argv)

    diagnostics = CompilerDiagnostics(verbose=args.verbose)
    options = dict(
        output_dir=args.output,
        diagnostics=diagnostics,
        dump_tokens=args.dump_tokens,
        dump_ast=args.dump_ast,
        dump_c_ast=args.dump_c_ast,
    )

    if args.expr is not None:
        transpiler = LispToCTranspiler(**options)
        try:
            print(transpiler.transpile_source(args.expr))
        except CompileError as e:
            diagnostics.error_from_exception(e, args.expr)
        diagnostics.print_summary()
        return 1 if diagnostics.has_errors else 0

    if args.input is None:
        return run_interactive(LispToCTranspiler(**options))

    input_path = Path(args.input)

    if input_path.is_file():
        transpiler = LispToCTranspiler(source_dir=str(input_path.parent), **options)
        try:
            c_code = transpiler.transpile_file(str(input_path))
        except CompileError:
            diagnostics.print_summary()
            return 1

        if args.stdout:
            print(c_code)
        else:
            transpiler.write_output({str(transpiler.output_path_for(input_path)): c_code})

    elif input_path.is_dir():
        transpiler = LispToCTranspiler(source_dir=str(input_path), **options)
        results = transpiler.transpile_directory()
        if args.stdout:
            for filepath, content in results.items():
                print(f'// {filepath}')
                print(content)
        else:
            transpiler.write_output(results)

    else:
        print(f"Error: {args.input} is not a valid file or directory", file=sys.stderr)
        return 1

    diagnostics.print_summary()
    return 1 if diagnostics.has_errors else 0


if __name__ == '__main__':
    sys.exit(main())
