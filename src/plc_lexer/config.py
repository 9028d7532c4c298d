"""
Lexer Configuration
===================

Options controlling how source text is scanned. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (plclex)
"""

from dataclasses import dataclass
import os


# Characters that already start a token or are skipped, and therefore
# cannot begin a comment marker
_RESERVED_MARKER_START = set(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_'\" \t\r\n\b"
)


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        filename: Source name used in error messages (default: "<input>")
        comment_marker: Text that starts an end-of-line comment (default: "//")
        collect_trivia: Record skipped whitespace and comments on the lexer
                        so the input can be reconstructed (default: True)
    """
    filename: str = "<input>"
    comment_marker: str = "//"
    collect_trivia: bool = True

    def __post_init__(self):
        if not self.comment_marker:
            raise ValueError("comment marker must not be empty")
        if self.comment_marker[0] in _RESERVED_MARKER_START:
            raise ValueError(
                f"comment marker {self.comment_marker!r} cannot start with "
                f"{self.comment_marker[0]!r}"
            )

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            PLC_LEXER_FILENAME: Source name for error messages
            PLC_LEXER_COMMENT_MARKER: Comment marker (ignored if invalid)
        """
        options = cls()

        if filename := os.environ.get("PLC_LEXER_FILENAME"):
            options.filename = filename

        if marker := os.environ.get("PLC_LEXER_COMMENT_MARKER"):
            try:
                options = cls(
                    filename=options.filename,
                    comment_marker=marker,
                    collect_trivia=options.collect_trivia,
                )
            except ValueError:
                pass  # Ignore invalid values

        return options
