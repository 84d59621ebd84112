"""
Error handling for the javalex scanner.

Lexical errors never abort a scan: each one becomes an ERROR token in the
output and a Diagnostic next to it. LexerError only exists for callers that
ask for strict behaviour through the convenience functions.
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum

from .tokens import SourceLocation


class ErrorKind(Enum):
    """Categories of lexical errors, valued by their diagnostic code."""
    INVALID_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"
    UNTERMINATED_BLOCK_COMMENT = "L003"


@dataclass(frozen=True)
class Diagnostic:
    """A lexer diagnostic with source location and optional help text."""
    message: str
    location: SourceLocation
    kind: ErrorKind
    severity: str = "error"
    help_text: Optional[str] = None

    @property
    def code(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        result = f"{self.severity.upper()}[{self.code}]: {self.message}\n"
        result += f"  --> {self.location}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity,
            "line": self.location.line,
            "column": self.location.column,
        }


class LexerError(Exception):
    """
    Exception carrying a Diagnostic.

    Raised only by the strict convenience entry points, never by the scanner.
    """

    def __init__(self, diagnostic: Diagnostic, others: Optional[List[Diagnostic]] = None):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.others = others or []

    def __str__(self) -> str:
        text = str(self.diagnostic)
        if self.others:
            text += f"  ({len(self.others)} more error(s))\n"
        return text


def invalid_character(char: str, location: SourceLocation) -> Diagnostic:
    """Create a diagnostic for an unrecognized character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in this language."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Invalid character: '{char}'",
        location=location,
        kind=ErrorKind.INVALID_CHARACTER,
        help_text=help_text,
    )


def unterminated_string(location: SourceLocation) -> Diagnostic:
    return Diagnostic(
        message="Unterminated string",
        location=location,
        kind=ErrorKind.UNTERMINATED_STRING,
        help_text="String literals must be closed with a matching \" quote.",
    )


def unterminated_block_comment(location: SourceLocation) -> Diagnostic:
    # Location is where the scan stopped, not where the comment opened
    return Diagnostic(
        message="Unterminated block comment",
        location=location,
        kind=ErrorKind.UNTERMINATED_BLOCK_COMMENT,
        help_text="Block comments must be closed with */.",
    )
