"""
Character class predicates used by the scanner.

All predicates are pure and accept the end-of-input sentinel, for which they
return False.
"""

WHITESPACE = frozenset({" ", "\t", "\r", "\n"})


def is_digit(char: str) -> bool:
    """ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    """Identifier start: any Unicode letter, '_' or '$'."""
    return char.isalpha() or char == "_" or char == "$"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE
