"""
javalex Lexer Package

Hand-written lexical analyzer for a Java-like language subset.

Key Features:
- Character-by-character scan with exact line/column tracking
- Maximal-munch operator recognition
- Identifier symbol table with occurrence counts in first-seen order
- Error recovery: lexical errors become ERROR tokens, scanning never aborts
"""

from .tokens import Token, TokenType, SourceLocation, LexerConfig, DEFAULT_CONFIG
from .cursor import Cursor
from .symbol_table import SymbolTable
from .lexer import Lexer, LexResult, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorKind, LexerError

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerConfig",
    "DEFAULT_CONFIG",
    "Cursor",
    "SymbolTable",
    "Diagnostic",
    "ErrorKind",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
