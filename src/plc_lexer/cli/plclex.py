"""
plclex - Lexer Command-Line Interface
=====================================

This module implements the command-line interface for the lexer. It reads
a source file (or stdin), tokenizes it, and prints one token per line.

Usage Examples
--------------
Tokenize a file:
    $ plclex program.plc

Read from stdin:
    $ echo 'x <= 10' | plclex

Include skipped whitespace and comments:
    $ plclex program.plc --trivia

Machine-readable output:
    $ plclex program.plc --json

Use '#' comments instead of '//':
    $ plclex script.plc --comment-marker '#'
"""

import json
from typing import Optional, TextIO

import click

from plc_lexer import __version__
from plc_lexer.cli.errors import configure_logging, handle_cli_exception
from plc_lexer.config import LexerOptions
from plc_lexer.lexer import Lexer
from plc_lexer.tokens import Token, Trivia


# =============================================================================
# Output Formatting
# =============================================================================

# Longest integer json can write; CPython limits int to str conversion
MAX_JSON_INT_DIGITS = 4300


def format_token(token: Token) -> str:
    """Format a token as 'line:col<TAB>KIND<TAB>literal'."""
    return f"{token.start}\t{token.kind.name}\t{token.literal!r}"


def format_trivia(item: Trivia) -> str:
    kind = "COMMENT" if item.comment else "WHITESPACE"
    return f"{item.start}\t{kind}\t{item.text!r}"


def token_to_dict(token: Token) -> dict:
    value = token.value
    if isinstance(value, int) and len(token.literal) > MAX_JSON_INT_DIGITS:
        value = token.literal
    elif value is not None and not isinstance(value, (str, int)):
        value = str(value)  # Decimal
    return {
        "kind": token.kind.name,
        "literal": token.literal,
        "value": value,
        "line": token.start.line,
        "column": token.start.column,
        "offset": token.start.offset,
    }


def trivia_to_dict(item: Trivia) -> dict:
    return {
        "kind": "COMMENT" if item.comment else "WHITESPACE",
        "text": item.text,
        "line": item.start.line,
        "column": item.start.column,
        "offset": item.start.offset,
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    default="-",
    type=click.File("r", encoding="utf-8"),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON document",
)
@click.option(
    "--trivia",
    is_flag=True,
    help="Also print skipped whitespace and comments",
)
@click.option(
    "-c", "--comment-marker",
    default=None,
    help="Text that starts an end-of-line comment (default: //, "
         "or $PLC_LEXER_COMMENT_MARKER)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging to stderr)",
)
@click.version_option(version=__version__, prog_name="plclex")
def main(
    input_file: TextIO,
    as_json: bool,
    trivia: bool,
    comment_marker: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a source file and print its tokens.

    INPUT_FILE is the file to read; omit it or pass '-' to read stdin.

    \b
    Output columns:
        line:column   position of the first character (both 1-based)
        KIND          IDENTIFIER, INTEGER, DECIMAL, STRING, CHARACTER,
                      OPERATOR or EOF
        literal       exact source text of the token
    """
    configure_logging(verbose)

    try:
        options = LexerOptions.from_env()
        if comment_marker is not None:
            options = LexerOptions(
                filename=options.filename,
                comment_marker=comment_marker,
            )

        source = input_file.read()
        if options.filename == LexerOptions().filename:
            # No PLC_LEXER_FILENAME override
            options.filename = input_file.name

        lexer = Lexer(source, options)
        tokens = list(lexer.tokenize())

        if as_json:
            document = {
                "filename": options.filename,
                "tokens": [token_to_dict(token) for token in tokens],
            }
            if trivia:
                document["trivia"] = [trivia_to_dict(item) for item in lexer.trivia]
            click.echo(json.dumps(document, indent=2))
            return

        if trivia:
            entries = [(t.start.offset, format_token(t)) for t in tokens]
            entries.extend((item.start.offset, format_trivia(item)) for item in lexer.trivia)
            entries.sort(key=lambda entry: entry[0])
            lines = [line for _, line in entries]
        else:
            lines = [format_token(token) for token in tokens]

        for line in lines:
            click.echo(line)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
