"""
PLC Lexer Error Hierarchy
=========================

This module defines the exception hierarchy for the lexer and its tools.
All exceptions inherit from PlcError, allowing callers to catch every
package error with a single except clause if desired.

Exception Hierarchy
-------------------
PlcError (base)
└── LexError - malformed or unrecognized source text
    ├── UnterminatedStringError - missing closing '"'
    ├── InvalidCharacterLiteralError - empty, too long or unterminated '...'
    ├── UnrecognizedSymbolError - character that starts no token
    └── InvalidEscapeSequenceError - unsupported backslash escape

Error Message Format
--------------------
Every lexing error carries the exact position of the offending text and
follows this format:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Example:
    main.plc:3:9: error: unterminated string literal
        let s = "hello
                ^
    hint: add closing '"' to complete the string
"""

from typing import Optional

from plc_lexer.tokens import Position


# =============================================================================
# Base Exception Class
# =============================================================================

class PlcError(Exception):
    """
    Base exception for all errors raised by this package.

        try:
            tokens = tokenize(source)
        except PlcError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(PlcError):
    """
    Base exception for all lexing errors.

    Attributes:
        message: The error description
        position: Where in the source the error occurred
        text: The offending character or substring
        filename: Name of the source (for display only)
        hint: A suggestion for fixing the error (optional)
        source_line: The source line containing the error (optional)
    """

    def __init__(
        self,
        message: str,
        position: Position,
        text: str = "",
        filename: str = "<input>",
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.text = text
        self.filename = filename
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def offset(self) -> int:
        return self.position.offset

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.plc:1:5: error: unrecognized symbol '$'
                let $x = 1;
                    ^
        """
        parts = [f"{self.filename}:{self.position}: error: {self.message}"]

        # Source context with caret pointer
        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.position.column)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexError):
    """
    Unterminated string literal.

    Raised when a string is not closed before the end of the line or the
    end of input. The position is that of the opening quote.

    Example:
        let s = "hello    // missing closing quote
    """

    def __init__(
        self,
        position: Position,
        text: str,
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            position,
            text=text,
            filename=filename,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class InvalidCharacterLiteralError(LexError):
    """
    Malformed character literal.

    A character literal holds exactly one character or one escape
    sequence. Empty literals (''), literals with more than one character
    ('ab') and unterminated literals all raise this error, positioned at
    the opening quote.
    """

    def __init__(
        self,
        reason: str,
        position: Position,
        text: str,
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ):
        self.reason = reason
        super().__init__(
            f"invalid character literal: {reason}",
            position,
            text=text,
            filename=filename,
            hint="character literals hold exactly one character, e.g. 'a' or '\\n'",
            source_line=source_line,
        )


class UnrecognizedSymbolError(LexError):
    """Character that cannot start any token."""

    def __init__(
        self,
        char: str,
        position: Position,
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unrecognized symbol {char!r} (U+{ord(char):04X})",
            position,
            text=char,
            filename=filename,
            source_line=source_line,
        )


class InvalidEscapeSequenceError(LexError):
    """
    Unsupported escape sequence inside a string or character literal.

    Supported escapes are \\b, \\n, \\r, \\t, \\', \\" and \\\\. The position
    is that of the backslash.
    """

    def __init__(
        self,
        sequence: str,
        position: Position,
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ):
        self.sequence = sequence
        super().__init__(
            f"invalid escape sequence {sequence!r}",
            position,
            text=sequence,
            filename=filename,
            hint="supported escapes are \\b \\n \\r \\t \\' \\\" \\\\",
            source_line=source_line,
        )
