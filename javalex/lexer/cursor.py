"""
Position-aware access to the source buffer.
"""

from .tokens import SourceLocation

# Returned by peek()/peek_next() past the end of the buffer
EOF_CHAR = "\0"


class Cursor:
    """
    Read-only view of a source string with a forward-only scan position.

    advance() is the only method that moves the position, and therefore the
    only place where line and column are updated.
    """

    def __init__(self, source: str):
        self.source = source
        self.index = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.index >= len(self.source)

    def peek(self) -> str:
        """Current character without consuming it."""
        if self.at_end():
            return EOF_CHAR
        return self.source[self.index]

    def peek_next(self) -> str:
        """Character one past the current one, without consuming anything."""
        if self.index + 1 >= len(self.source):
            return EOF_CHAR
        return self.source[self.index + 1]

    def advance(self) -> str:
        """Consume and return the current character, updating line/column."""
        if self.at_end():
            raise IndexError("advance() past end of input")
        char = self.source[self.index]
        self.index += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def location(self, filename: str = "<unknown>") -> SourceLocation:
        """Snapshot of the current position."""
        return SourceLocation(filename, self.line, self.column, self.index)

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, line={self.line}, column={self.column})"
