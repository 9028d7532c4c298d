"""
PLC Lexer (Tokenizer)
=====================

This module converts source text into an ordered sequence of tokens.

Token Categories
----------------
- Identifiers: letters, digits and underscores, not starting with a digit.
  Keywords are NOT recognized here; `if` is an IDENTIFIER.
- Integers: 123
- Decimals: 3.14 (a dot must be followed by a digit, so `1.` is `1` then `.`)
- Strings: "double quoted", single line, with escapes
- Characters: 'x' or '\\n', exactly one character
- Operators: <= >= == != && || and single-character punctuation

Comments
--------
- End-of-line: // comment (marker configurable through LexerOptions)

Escape Sequences
----------------
\\b (backspace), \\n (newline), \\r (return), \\t (tab),
\\' (quote), \\" (double quote), \\\\ (backslash)

Disambiguation
--------------
Every branch consumes the longest valid prefix (maximal munch): `<=` is
one operator, never `<` followed by `=`.

Error Policy
------------
Scanning is strict: the first malformed construct raises a LexError
subclass carrying its exact position. There is no recovery mode.

Example Usage
-------------
>>> from plc_lexer import tokenize
>>> for token in tokenize('let x = 1.5;'):
...     print(token)
Token(IDENTIFIER, 'let', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(OPERATOR, '=', 1:7)
Token(DECIMAL, '1.5', 1:9)
Token(OPERATOR, ';', 1:12)
Token(EOF, 1:13)
"""

from decimal import Decimal
from typing import Iterator, Optional
import logging
import string

from plc_lexer.chars import CharStream
from plc_lexer.config import LexerOptions
from plc_lexer.errors import (
    InvalidCharacterLiteralError,
    InvalidEscapeSequenceError,
    UnrecognizedSymbolError,
    UnterminatedStringError,
)
from plc_lexer.tokens import (
    MULTI_CHAR_OPERATORS,
    SINGLE_CHAR_OPERATORS,
    Position,
    Token,
    TokenKind,
    Trivia,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_"
DIGITS = string.digits
WHITESPACE = " \t\n\r\b"

# Characters that end a single-line literal (the empty string is end of input)
LINE_END = ("", "\n", "\r")

ESCAPE_SEQUENCES = {
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text.

    Each Lexer owns one CharStream and scans it once. Tokens are produced
    lazily by tokenize(); skipped whitespace and comments are recorded in
    `trivia` as scanning proceeds.

    Usage:
        lexer = Lexer(source, LexerOptions(filename="main.plc"))
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
        options: Scanning options
        trivia: Skipped spans, in source order
    """

    def __init__(self, source: str, options: Optional[LexerOptions] = None):
        self.source = source
        self.options = options or LexerOptions()
        self.trivia: list[Trivia] = []
        self._chars = CharStream(source)

        # First-character dispatch table
        self._dispatch = {}
        for char in IDENT_START:
            self._dispatch[char] = self._scan_identifier
        for char in DIGITS:
            self._dispatch[char] = self._scan_number
        for char in SINGLE_CHAR_OPERATORS | set(MULTI_CHAR_OPERATORS):
            self._dispatch[char] = self._scan_operator
        self._dispatch['"'] = self._scan_string
        self._dispatch["'"] = self._scan_character

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order, ending with exactly one EOF token

        Raises:
            LexError: On the first malformed or unrecognized construct
        """
        logger.debug(f"Scanning {self.options.filename} ({len(self.source)} chars)")
        count = 0

        while True:
            self._skip_whitespace_and_comments()
            if self._chars.at_end():
                break
            yield self._scan_token()
            count += 1

        logger.debug(f"Scanned {count} tokens from {self.options.filename}")
        yield Token(TokenKind.EOF, "", self._chars.position)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip whitespace runs and comments, recording them as trivia."""
        chars = self._chars
        marker = self.options.comment_marker

        while not chars.at_end():
            start = chars.position

            if chars.peek() in WHITESPACE:
                while chars.peek() and chars.peek() in WHITESPACE:
                    chars.advance()
                self._add_trivia(start, comment=False)
                continue

            if self.source.startswith(marker, chars.offset):
                # The line break itself is left for the whitespace branch
                while chars.peek() not in LINE_END:
                    chars.advance()
                self._add_trivia(start, comment=True)
                continue

            break

    def _add_trivia(self, start: Position, comment: bool) -> None:
        if self.options.collect_trivia:
            self.trivia.append(Trivia(start, self._chars.text_since(start), comment))

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Classify the next token by its first character."""
        start = self._chars.position
        char = self._chars.peek()

        scanner = self._dispatch.get(char)
        if scanner is None:
            raise UnrecognizedSymbolError(
                char,
                start,
                filename=self.options.filename,
                source_line=self._chars.line_text(start),
            )
        return scanner(start)

    def _make_token(self, kind: TokenKind, start: Position, value=None) -> Token:
        literal = self._chars.text_since(start)
        return Token(kind, literal, start, literal if value is None else value)

    def _scan_identifier(self, start: Position) -> Token:
        """Scan letters, digits and underscores."""
        while self._chars.peek() and self._chars.peek() in IDENT_CHARS:
            self._chars.advance()
        return self._make_token(TokenKind.IDENTIFIER, start)

    def _scan_number(self, start: Position) -> Token:
        """
        Scan an integer or decimal literal.

        The fraction is only consumed when the dot is followed by a digit,
        so `1.` scans as INTEGER `1` and leaves the dot for the operator scan.
        """
        self._consume_digits()

        if self._chars.match(".", DIGITS):
            self._consume_digits()
            literal = self._chars.text_since(start)
            return self._make_token(TokenKind.DECIMAL, start, Decimal(literal))

        literal = self._chars.text_since(start)
        # Through Decimal, which has no limit on the number of digits
        return self._make_token(TokenKind.INTEGER, start, int(Decimal(literal)))

    def _consume_digits(self) -> None:
        while self._chars.peek() and self._chars.peek() in DIGITS:
            self._chars.advance()

    def _scan_string(self, start: Position) -> Token:
        """
        Scan a double-quoted string literal.

        The token literal keeps the quotes and escapes as written; the value
        holds the decoded contents.
        """
        chars = self._chars
        chars.advance()  # consume opening "

        decoded = []
        while chars.peek() != '"':
            char = chars.peek()
            if char in LINE_END or (char == "\\" and chars.peek(1) in LINE_END):
                raise UnterminatedStringError(
                    start,
                    chars.text_since(start),
                    filename=self.options.filename,
                    source_line=chars.line_text(start),
                )
            if char == "\\":
                decoded.append(self._scan_escape())
            else:
                decoded.append(chars.advance())

        chars.advance()  # consume closing "
        return self._make_token(TokenKind.STRING, start, "".join(decoded))

    def _scan_character(self, start: Position) -> Token:
        """Scan a single-quoted literal holding exactly one character."""
        chars = self._chars
        chars.advance()  # consume opening '

        char = chars.peek()
        if char in LINE_END or (char == "\\" and chars.peek(1) in LINE_END):
            raise self._character_error("unterminated", start)
        if char == "'":
            chars.advance()
            raise self._character_error("empty", start)

        if char == "\\":
            value = self._scan_escape()
        else:
            value = chars.advance()

        if chars.peek() != "'":
            if chars.peek() in LINE_END:
                raise self._character_error("unterminated", start)
            raise self._character_error("more than one character", start)

        chars.advance()  # consume closing '
        return self._make_token(TokenKind.CHARACTER, start, value)

    def _character_error(self, reason: str, start: Position) -> InvalidCharacterLiteralError:
        return InvalidCharacterLiteralError(
            reason,
            start,
            self._chars.text_since(start),
            filename=self.options.filename,
            source_line=self._chars.line_text(start),
        )

    def _scan_escape(self) -> str:
        """
        Consume a backslash escape and return the character it stands for.

        The caller guarantees a character follows the backslash.
        """
        chars = self._chars
        start = chars.position
        sequence = chars.peek() + chars.peek(1)

        if sequence[1] not in ESCAPE_SEQUENCES:
            raise InvalidEscapeSequenceError(
                sequence,
                start,
                filename=self.options.filename,
                source_line=chars.line_text(start),
            )

        chars.advance()  # consume backslash
        return ESCAPE_SEQUENCES[chars.advance()]

    def _scan_operator(self, start: Position) -> Token:
        """
        Scan an operator, preferring the longest known match.

        Multi-character candidates are tried before the single character,
        so `<=` always wins over `<`.
        """
        chars = self._chars
        first = chars.peek()

        for candidate in MULTI_CHAR_OPERATORS.get(first, ()):
            if chars.match(*candidate):
                return self._make_token(TokenKind.OPERATOR, start)

        if first not in SINGLE_CHAR_OPERATORS:
            raise UnrecognizedSymbolError(
                first,
                start,
                filename=self.options.filename,
                source_line=chars.line_text(start),
            )

        chars.advance()
        return self._make_token(TokenKind.OPERATOR, start)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Tokenize source text into a list ending with one EOF token.

    Args:
        source: The source text
        options: Scanning options (defaults if None)

    Raises:
        LexError: On the first malformed or unrecognized construct
    """
    return list(Lexer(source, options).tokenize())


def reconstruct(tokens: list[Token], trivia: list[Trivia]) -> str:
    """Rebuild the source text from tokens and the trivia skipped between them."""
    spans = [(token.start.offset, token.literal) for token in tokens]
    spans.extend((item.start.offset, item.text) for item in trivia)
    spans.sort(key=lambda span: span[0])
    return "".join(text for _, text in spans)
