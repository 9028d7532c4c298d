"""
PLC Lexer - Tokenizer for a Small Teaching Language
===================================================

This package converts raw source text into an ordered sequence of typed
tokens, ready for a downstream parser. It also ships the regex patterns
used to prototype the lexer's classification rules.

Main Components
---------------
- **lexer**: the scanner (Lexer, tokenize)
    Maximal-munch tokenization with exact position tracking

- **chars**: character stream with lookahead (CharStream)

- **tokens**: token kinds, positions and operator tables

- **regex**: named classification patterns and a regex file filter

- **cli**: command-line tools (plclex, plcregex)

Quick Start
-----------
Tokenize a string:
    >>> from plc_lexer import tokenize
    >>> [t.literal for t in tokenize("x <= 10")]
    ['x', '<=', '10', '']

Handle errors:
    >>> from plc_lexer import LexError
    >>> try:
    ...     tokenize('"abc')
    ... except LexError as e:
    ...     print(e.position)
    1:1

Or use the command-line tools:
    $ plclex program.plc
    $ plcregex match EMAIL < addresses.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from plc_lexer.chars import CharStream
from plc_lexer.config import LexerOptions
from plc_lexer.errors import (
    PlcError,
    LexError,
    UnterminatedStringError,
    InvalidCharacterLiteralError,
    UnrecognizedSymbolError,
    InvalidEscapeSequenceError,
)
from plc_lexer.lexer import Lexer, tokenize, reconstruct
from plc_lexer.tokens import Position, Token, TokenKind, Trivia

__all__ = [
    "__version__",
    # Scanning
    "CharStream",
    "Lexer",
    "LexerOptions",
    "tokenize",
    "reconstruct",
    # Tokens
    "Position",
    "Token",
    "TokenKind",
    "Trivia",
    # Exception hierarchy
    "PlcError",
    "LexError",
    "UnterminatedStringError",
    "InvalidCharacterLiteralError",
    "UnrecognizedSymbolError",
    "InvalidEscapeSequenceError",
]
