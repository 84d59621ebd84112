"""
javalex Lexer - turns Java-subset source text into tokens

Hand-written scanner: no regexes, no generated automata. Each iteration of
the main loop looks at the current character, decides which kind of token
starts there and hands off to a small sub-scanner. Errors are reported as
ERROR tokens and scanning carries on with the next character.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, LexerConfig, DEFAULT_CONFIG
from .cursor import Cursor
from .chars import is_alpha, is_alphanumeric, is_digit, is_whitespace
from .symbol_table import SymbolTable
from .errors import (
    Diagnostic, LexerError, invalid_character, unterminated_string,
    unterminated_block_comment,
)

logger = logging.getLogger(__name__)


@dataclass
class LexResult:
    """Everything one tokenize() call produces."""
    tokens: List[Token]
    symbol_table: SymbolTable
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def error_tokens(self) -> List[Token]:
        return [tok for tok in self.tokens if tok.kind == TokenType.ERROR]


class Lexer:
    """
    Scanner for the Java subset.

    A Lexer is bound to one source string. Each call to tokenize() is an
    independent session with its own cursor, symbol table and diagnostics.
    Not safe to share between threads.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 config: Optional[LexerConfig] = None):
        """
        Args:
            source: Source code string
            filename: Name reported in diagnostics
            config: Classification tables; DEFAULT_CONFIG when omitted
        """
        self.source = source
        self.filename = filename
        self.config = config or DEFAULT_CONFIG

        self.cursor = Cursor(source)
        self.tokens: List[Token] = []
        self.symbol_table = SymbolTable()
        self.diagnostics: List[Diagnostic] = []

    def tokenize(self) -> LexResult:
        """
        Tokenize the entire source.

        Returns:
            LexResult whose token list always ends with exactly one EOF token
        """
        self.cursor = Cursor(self.source)
        self.tokens = []
        self.symbol_table = SymbolTable()
        self.diagnostics = []

        while not self.cursor.at_end():
            self._scan_token()

        self._add_token(TokenType.EOF, "", self._here())

        logger.debug(
            "%s: %d tokens, %d identifiers, %d errors",
            self.filename, len(self.tokens), len(self.symbol_table), len(self.diagnostics),
        )
        return LexResult(self.tokens, self.symbol_table, self.diagnostics)

    def _scan_token(self):
        """Decide which token starts at the cursor and consume it."""
        start = self._here()
        char = self.cursor.peek()
        next_char = self.cursor.peek_next()

        if is_whitespace(char):
            self.cursor.advance()
            return

        # Comments must be checked before '/' is taken as an operator
        if char == "/" and next_char == "/":
            self._scan_line_comment(start)
            return
        if char == "/" and next_char == "*":
            self._scan_block_comment(start)
            return

        if char == '"':
            self._scan_string(start)
            return

        if char in self.config.delimiters:
            self.cursor.advance()
            self._add_token(TokenType.DELIMITER, char, start)
            return

        # Two-character operators first (maximal munch)
        pair = char + next_char
        if pair in self.config.two_char_operators:
            self.cursor.advance()
            self.cursor.advance()
            self._add_token(TokenType.OPERATOR, pair, start)
            return
        if char in self.config.one_char_operators:
            self.cursor.advance()
            self._add_token(TokenType.OPERATOR, char, start)
            return

        if is_digit(char):
            self._scan_number(start)
            return

        if is_alpha(char):
            self._scan_identifier_or_keyword(start)
            return

        # Anything else is reported and skipped, one character at a time
        self.cursor.advance()
        self._add_error(char, start, invalid_character(char, start))

    def _scan_identifier_or_keyword(self, start: SourceLocation):
        while is_alphanumeric(self.cursor.peek()):
            self.cursor.advance()
        lexeme = self.source[start.offset:self.cursor.index]

        if lexeme in self.config.keywords:
            self._add_token(TokenType.KEYWORD, lexeme, start)
        else:
            self._add_token(TokenType.IDENTIFIER, lexeme, start)
            self.symbol_table.record(lexeme)

    def _scan_number(self, start: SourceLocation):
        """Digits, optionally followed by '.' and more digits."""
        while is_digit(self.cursor.peek()):
            self.cursor.advance()

        # A '.' without a digit after it is left for the DELIMITER rule
        if self.cursor.peek() == "." and is_digit(self.cursor.peek_next()):
            self.cursor.advance()
            while is_digit(self.cursor.peek()):
                self.cursor.advance()

        self._add_token(TokenType.NUMBER, self.source[start.offset:self.cursor.index], start)

    def _scan_string(self, start: SourceLocation):
        """
        Double-quoted string; the lexeme is the body without quotes.

        Newlines are allowed inside the body. No escape sequences are
        interpreted, a backslash is kept as-is.
        """
        self.cursor.advance()  # opening quote

        while not self.cursor.at_end() and self.cursor.peek() != '"':
            self.cursor.advance()

        if self.cursor.at_end():
            diagnostic = unterminated_string(start)
            self._add_error(diagnostic.message, start, diagnostic)
            return

        body = self.source[start.offset + 1:self.cursor.index]
        self.cursor.advance()  # closing quote
        self._add_token(TokenType.STRING, body, start)

    def _scan_line_comment(self, start: SourceLocation):
        self.cursor.advance()
        self.cursor.advance()
        while not self.cursor.at_end() and self.cursor.peek() != "\n":
            self.cursor.advance()

        if self.config.keep_comments:
            self._add_token(TokenType.COMMENT, self.source[start.offset:self.cursor.index], start)

    def _scan_block_comment(self, start: SourceLocation):
        self.cursor.advance()
        self.cursor.advance()

        while not self.cursor.at_end():
            if self.cursor.peek() == "*" and self.cursor.peek_next() == "/":
                self.cursor.advance()
                self.cursor.advance()
                if self.config.keep_comments:
                    self._add_token(TokenType.COMMENT,
                                    self.source[start.offset:self.cursor.index], start)
                return
            self.cursor.advance()

        # Reported where the scan stopped (end of input), unlike strings
        end = self._here()
        diagnostic = unterminated_block_comment(end)
        self._add_error(diagnostic.message, end, diagnostic)

    def _here(self) -> SourceLocation:
        return self.cursor.location(self.filename)

    def _add_token(self, kind: TokenType, lexeme: str, where: SourceLocation):
        self.tokens.append(Token(kind, lexeme, where.line, where.column))

    def _add_error(self, lexeme: str, where: SourceLocation, diagnostic: Diagnostic):
        logger.debug("%s: %s", where, diagnostic.message)
        self._add_token(TokenType.ERROR, lexeme, where)
        self.diagnostics.append(diagnostic)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None,
                    strict: bool = False) -> LexResult:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics
        config: Classification tables
        strict: Raise instead of returning a result with errors

    Returns:
        LexResult of one session

    Raises:
        LexerError: If strict and the source has lexical errors
    """
    result = Lexer(source, filename, config).tokenize()

    if strict and result.has_errors():
        raise LexerError(result.diagnostics[0], result.diagnostics[1:])

    return result


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None,
                  strict: bool = False) -> LexResult:
    """
    Convenience function to tokenize a UTF-8 source file.

    Raises:
        LexerError: If strict and the file has lexical errors
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, config, strict)
