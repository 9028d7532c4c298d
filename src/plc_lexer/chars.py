"""
Character Stream
================

Cursor over a source string with lookahead and position tracking. One
Python code point is one scanning unit for every offset and column.

A stream is owned by a single Lexer; the lexer never rewinds it.
"""

from plc_lexer.tokens import Position, START


class CharStream:
    """
    Wraps source text and tracks the cursor position.

    Out-of-range lookahead returns the empty string sentinel rather than
    failing, so callers can compare the result against character sets
    without bounds checks.

    Usage:
        chars = CharStream("a <= b")
        chars.peek()      # 'a'
        chars.advance()   # 'a'
        chars.position    # Position(line=1, column=1, offset=1)
    """

    def __init__(self, source: str):
        self.source = source
        self._offset = START.offset
        self._line = START.line
        self._column = START.column

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def at_end(self) -> bool:
        """Check if all input has been consumed."""
        return self._offset >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at cursor + offset without consuming it.

        Returns "" if that index is outside the source.
        """
        index = self._offset + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def advance(self) -> str:
        """
        Consume and return the current character.

        A newline increments the line and resets the column to 0.
        """
        if self.at_end():
            return ""

        char = self.source[self._offset]
        self._offset += 1

        if char == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1

        return char

    def match(self, *char_sets: str) -> bool:
        """
        Consume the next len(char_sets) characters if each one belongs to
        the corresponding set.

            chars.match("<>!=", "=")   # consumes '<=' but not '<x'

        Returns:
            True if matched and consumed, False otherwise (nothing consumed)
        """
        for index, char_set in enumerate(char_sets):
            char = self.peek(index)
            if not char or char not in char_set:
                return False
        for _ in char_sets:
            self.advance()
        return True

    # =========================================================================
    # Position Tracking
    # =========================================================================

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def position(self) -> Position:
        """The position of the next character to be consumed."""
        return Position(self._line, self._column, self._offset)

    def text_since(self, start: Position) -> str:
        """Return the source text consumed since start."""
        return self.source[start.offset:self._offset]

    def line_text(self, position: Position) -> str:
        """Return the full source line containing position (without newline)."""
        line_start = self.source.rfind("\n", 0, position.offset) + 1
        line_end = self.source.find("\n", position.offset)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end].rstrip("\r")
