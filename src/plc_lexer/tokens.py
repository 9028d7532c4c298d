"""
Token Definitions
=================

Token kinds, source positions and the operator tables used by the lexer.

Token Kinds
-----------
| Kind       | Example     | Decoded value           |
|------------|-------------|-------------------------|
| IDENTIFIER | if, x_1     | the literal text        |
| INTEGER    | 42          | int                     |
| DECIMAL    | 3.14        | decimal.Decimal         |
| STRING     | "a\\nb"      | str, escapes decoded    |
| CHARACTER  | 'x', '\\t'   | one-character str       |
| OPERATOR   | <=, (, ;    | the literal text        |
| EOF        |             | None                    |

Keywords are not distinguished from identifiers at this layer.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of token categories."""

    IDENTIFIER = auto()
    INTEGER = auto()
    DECIMAL = auto()
    STRING = auto()
    CHARACTER = auto()
    OPERATOR = auto()       # all punctuation and symbols
    EOF = auto()            # exactly one, always last


# =============================================================================
# Operator Tables
# =============================================================================

# Multi-character operators, keyed by their first character. Longer
# candidates are listed first so the first hit is the longest match.
MULTI_CHAR_OPERATORS: dict[str, tuple[str, ...]] = {
    "<": ("<=",),
    ">": (">=",),
    "=": ("==",),
    "!": ("!=",),
    "&": ("&&",),
    "|": ("||",),
}

SINGLE_CHAR_OPERATORS = frozenset("+-*/%<>=!&|^~?:;,.()[]{}")

# Longest operator length, i.e. how far the lexer ever looks ahead
MAX_OPERATOR_LENGTH = max(
    len(op) for candidates in MULTI_CHAR_OPERATORS.values() for op in candidates
)


# =============================================================================
# Positions
# =============================================================================

@dataclass(frozen=True, order=True)
class Position:
    """
    A location in source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (0-indexed, reset to 0 after each newline)
        offset: Absolute character offset (0-indexed)
    """
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        """Format as 'line:column' with a 1-based column, as editors expect."""
        return f"{self.line}:{self.column + 1}"


START = Position(line=1, column=0, offset=0)


# =============================================================================
# Token and Trivia Records
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified, positioned span of source text.

    Attributes:
        kind: The TokenKind classification
        literal: Exact source text of the token (quotes and escapes kept)
        start: Position of the first character
        value: Decoded value (see module table)
    """
    kind: TokenKind
    literal: str
    start: Position
    value: str | int | Decimal | None = None

    def __repr__(self) -> str:
        if self.kind is TokenKind.EOF:
            return f"Token(EOF, {self.start})"
        return f"Token({self.kind.name}, {self.literal!r}, {self.start})"

    @property
    def end(self) -> int:
        """Offset just past the last character of the token."""
        return self.start.offset + len(self.literal)


@dataclass(frozen=True)
class Trivia:
    """Skipped source text (a whitespace run or a comment)."""
    start: Position
    text: str
    comment: bool = False

    @property
    def end(self) -> int:
        return self.start.offset + len(self.text)
