"""
plcregex - Pattern Testing Command-Line Interface
=================================================

Interactive testing of the classification patterns in plc_lexer.regex,
plus a regex-based directory listing.

Usage Examples
--------------
Test lines typed on stdin against a pattern:
    $ plcregex match EMAIL
    me@ufl.edu
    Matches: true

Show captured groups:
    $ echo 3/14/2026 | plcregex match date_notation
    Matches: true
     - Group month: 3
     - Group day: 14
     - Group year: 2026

List the available patterns:
    $ plcregex patterns

List files whose names match a regex:
    $ plcregex files ./src '.*\\.py'
"""

import re
from pathlib import Path
from typing import Optional

import click

from plc_lexer import __version__
from plc_lexer.cli.errors import configure_logging, handle_cli_exception
from plc_lexer.regex import (
    DATE_NOTATION,
    PATTERNS,
    RegexFileFilter,
    get_groups,
    list_files,
    match_date,
)


# =============================================================================
# Pattern Name Parameter Type
# =============================================================================

class PatternChoice(click.ParamType):
    """
    Click parameter type for pattern selection.

    Accepts any name from plc_lexer.regex.PATTERNS (case-insensitive).
    """
    name = "pattern"

    def convert(self, value, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> re.Pattern:
        """Convert a pattern name to the compiled pattern."""
        if isinstance(value, re.Pattern):
            return value

        key = value.upper()
        if key not in PATTERNS:
            self.fail(
                f"Unknown pattern '{value}'. "
                f"Choose from: {', '.join(PATTERNS)}",
                param, ctx
            )
        return PATTERNS[key]


PATTERN = PatternChoice()


def describe_match(pattern: re.Pattern, line: str, check_dates: bool = False) -> list[str]:
    """
    Return the report lines for one input line.

    With check_dates, DATE_NOTATION matches must also be real calendar days.
    """
    if check_dates and pattern is DATE_NOTATION:
        groups = match_date(line)
        matched = groups is not None
    else:
        match = pattern.fullmatch(line)
        matched = match is not None
        groups = get_groups(match) if matched else {}

    report = [f"Matches: {'true' if matched else 'false'}"]
    for name, value in (groups or {}).items():
        report.append(f" - Group {name}: {value}")
    return report


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging to stderr)",
)
@click.version_option(__version__, "--version", "-V", prog_name="plcregex")
def main(verbose: bool) -> None:
    """
    Test classification patterns against input.

    \b
    Commands:
      match     Match stdin lines against a named pattern
      patterns  List pattern names and their expressions
      files     List directory entries matching a regex

    \b
    Examples:
      plcregex match EMAIL < addresses.txt
      plcregex patterns
      plcregex files ./src '.*\\.py'
    """
    configure_logging(verbose)


@main.command("match")
@click.argument("pattern", type=PATTERN)
@click.option(
    "--check-dates",
    is_flag=True,
    help="For DATE_NOTATION, also reject days that do not exist",
)
def match_command(pattern: re.Pattern, check_dates: bool) -> None:
    """
    Match each stdin line against PATTERN.

    Each line is matched as a whole. Captured groups are printed below
    every successful match.
    """
    with click.open_file("-") as stdin:
        for line in stdin:
            for report_line in describe_match(pattern, line.rstrip("\r\n"), check_dates):
                click.echo(report_line)


@main.command("patterns")
def patterns_command() -> None:
    """List pattern names and their expressions."""
    width = max(len(name) for name in PATTERNS)
    for name, pattern in PATTERNS.items():
        click.echo(f"{name:<{width}}  {pattern.pattern}")


@main.command("files")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.argument("regex")
@click.option(
    "--path", "match_path",
    is_flag=True,
    help="Match against the full path instead of the file name",
)
def files_command(directory: Path, regex: str, match_path: bool) -> None:
    """
    List entries of DIRECTORY whose name fully matches REGEX.
    """
    try:
        file_filter = RegexFileFilter(re.compile(regex), filename=not match_path)
        for entry in list_files(directory, file_filter):
            click.echo(str(entry))
    except re.error as e:
        handle_cli_exception(ValueError(f"invalid regex {regex!r}: {e}"))
    except Exception as e:
        handle_cli_exception(e)


if __name__ == "__main__":
    main()
