"""
javalex - lexical analyzer for a Java-like language subset

Architecture:
    javalex/
    ├── lexer/           # Cursor, scanner, tokens, symbol table, diagnostics
    ├── sample.py        # Bundled sample program
    └── cli.py           # Command-line front end
"""

from ._version import __version__
from .lexer import (
    Lexer, LexResult, Token, TokenType, LexerConfig, SymbolTable,
    tokenize_string, tokenize_file,
)

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "LexerConfig",
    "SymbolTable",
    "tokenize_string",
    "tokenize_file",
    "__version__",
]
