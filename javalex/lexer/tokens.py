"""
Token definitions for the javalex scanner.

This module defines the token categories produced by the scanner and the
fixed lookup tables it uses to classify what it reads:
- Keywords of the supported Java subset
- Two-character and one-character operators
- Delimiters / punctuation
"""

from enum import Enum, auto
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable


class TokenType(Enum):
    """
    Enumeration of the token categories.

    The scanner classifies coarsely: every operator is an OPERATOR and every
    punctuation mark a DELIMITER, the lexeme tells them apart.
    """

    KEYWORD = auto()                # public, class, if, else, ...
    IDENTIFIER = auto()             # variables, classes, methods
    NUMBER = auto()                 # 3, 5.50, 100.0
    STRING = auto()                 # "text" (quotes stripped)
    OPERATOR = auto()               # =, +, <=, ++, -=, ...
    DELIMITER = auto()              # ( ) { } [ ] ; , .
    COMMENT = auto()                # only emitted when keep_comments is set
    EOF = auto()                    # end of input
    ERROR = auto()                  # invalid character or unterminated literal


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for diagnostics; tokens carry only line and column.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme together with the position of its first character.

    For ERROR tokens the lexeme is either the offending character or a
    diagnostic message such as "Unterminated string".
    """
    kind: TokenType
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[{self.line}:{self.column}] {self.kind.name} -> \"{self.lexeme}\""

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}, {self.column})"


# Lookup tables used by the scanner for classification.

KEYWORDS = frozenset({
    "public", "class", "private", "static", "final",
    "int", "double", "void", "if", "else", "new", "return",
    "String",
})

# Always tried before the one-character operators (maximal munch)
TWO_CHAR_OPERATORS = frozenset({
    "<=", ">=", "==", "!=", "++", "--", "+=", "-=", "*=", "/=", "&&", "||",
})

ONE_CHAR_OPERATORS = frozenset({
    "=", "+", "-", "*", "/", "<", ">", "!", "%",
})

DELIMITERS = frozenset({
    "(", ")", "{", "}", "[", "]", ";", ",", ".",
})


@dataclass(frozen=True)
class LexerConfig:
    """
    Immutable classification tables owned by a Lexer instance.

    Attributes:
        keywords: Words reported as KEYWORD instead of IDENTIFIER
        two_char_operators: Operators matched before single characters
        one_char_operators: Single-character operators
        delimiters: Single-character punctuation
        keep_comments: Emit COMMENT tokens instead of discarding comments
    """
    keywords: FrozenSet[str] = field(default=KEYWORDS)
    two_char_operators: FrozenSet[str] = field(default=TWO_CHAR_OPERATORS)
    one_char_operators: FrozenSet[str] = field(default=ONE_CHAR_OPERATORS)
    delimiters: FrozenSet[str] = field(default=DELIMITERS)
    keep_comments: bool = False

    def __post_init__(self):
        # Accept any iterable of strings, store frozensets
        for name in ("keywords", "two_char_operators", "one_char_operators", "delimiters"):
            table = getattr(self, name)
            if isinstance(table, str):
                raise TypeError(f"{name} must be a collection of strings, not a string")
            object.__setattr__(self, name, frozenset(table))

        bad =[op for op in self.two_char_operators if len(op) != 2]
        if bad:
            raise ValueError(f"two_char_operators must contain two-character strings, got {sorted(bad)}")
        for name in ("one_char_operators", "delimiters"):
            bad = [op for op in getattr(self, name) if len(op) != 1]
            if bad:
                raise ValueError(f"{name} must contain single characters, got {sorted(bad)}")

    def with_keywords(self, extra: Iterable[str]) -> "LexerConfig":
        """Return a copy of this config with additional keywords."""
        return replace(self, keywords=self.keywords | frozenset(extra))


DEFAULT_CONFIG = LexerConfig()
