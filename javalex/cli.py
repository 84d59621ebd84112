#!/usr/bin/env python3
"""
Command-line front end: lex a file (or the bundled sample) and print the
tokens and the identifier table.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from ._version import __version__
from .lexer import LexerConfig, LexResult, tokenize_string
from .sample import SAMPLE_PROGRAM

logger = logging.getLogger(__name__)


def format_tokens(result: LexResult) -> List[str]:
    lines = ["=== Tokens ==="]
    lines.extend(str(token) for token in result.tokens)
    return lines


def format_symbol_table(result: LexResult) -> List[str]:
    lines = ["=== Symbol Table (Identifiers) ==="]
    for name, count in result.symbol_table.entries():
        lines.append(f"{name}  (count={count})")
    return lines


def result_to_json(result: LexResult, include_symbols: bool = True) -> dict:
    """JSON-serializable view of a lexing session."""
    data = {
        "tokens": [
            {
                "kind": token.kind.name,
                "lexeme": token.lexeme,
                "line": token.line,
                "column": token.column,
            }
            for token in result.tokens
        ],
        "errors": [diag.to_dict() for diag in result.diagnostics],
    }
    if include_symbols:
        data["symbols"] = result.symbol_table.to_dict()
    return data


def _read_source(path: Optional[str], stdin: TextIO):
    if path is None:
        return SAMPLE_PROGRAM, "<sample>"
    if path == "-":
        return stdin.read(), "<stdin>"
    with open(path, "r", encoding="utf-8") as f:
        return f.read(), path


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Entry point for the javalex console script."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = argparse.ArgumentParser(
        prog="javalex",
        description="Lexical analyzer for a Java-like language subset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    javalex                      # Lex the bundled sample program
    javalex Foo.java             # Lex a file
    cat Foo.java | javalex -     # Lex standard input
    javalex --json Foo.java      # Machine-readable output
        """
    )
    parser.add_argument('file', nargs='?',
                        help='Source file to lex ("-" for stdin, sample program if omitted)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens, symbols and errors as JSON')
    parser.add_argument('--comments', action='store_true',
                        help='Emit COMMENT tokens instead of discarding comments')
    parser.add_argument('--no-symbols', action='store_true',
                        help='Do not print the symbol table')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        source, filename = _read_source(args.file, stdin)
    except (OSError, UnicodeDecodeError) as e:
        print(f"javalex: cannot read {args.file}: {getattr(e, 'strerror', None) or e}", file=sys.stderr)
        return 2

    config = LexerConfig(keep_comments=args.comments)
    result = tokenize_string(source, filename, config)

    if args.json:
        print(json.dumps(result_to_json(result, not args.no_symbols), indent=2,
                         ensure_ascii=False), file=stdout)
    else:
        output = format_tokens(result)
        if not args.no_symbols:
            output.append("")
            output.extend(format_symbol_table(result))
        print("\n".join(output), file=stdout)

    if result.has_errors():
        logger.warning("%s: %d lexical error(s)", filename, len(result.diagnostics))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
