"""
Classification Patterns
=======================

Regular expressions used to prototype the lexer's token rules, plus a
few everyday patterns and a regex-driven file filter.

All patterns are meant for whole-string matching (`pattern.fullmatch`).

| Name          | Matches                                   | Example           |
|---------------|-------------------------------------------|-------------------|
| EMAIL         | name@domain.tld (one domain label)        | me@ufl.edu        |
| SEARCH_TERM   | any text containing "search"              | google search     |
| DISCOUNT_CSV  | comma separated values, no empty fields   | a , b,c           |
| DATE_NOTATION | month/day[/year] without leading zeros    | 3/14/2026         |
| NUMBER        | signed number with fraction and exponent  | -1.5e10           |
| STRING        | double-quoted string with escapes         | "say \\"hi\\""      |

DATE_NOTATION only checks the shape of a date; use match_date() to also
reject impossible days such as 2/29/2023 or 4/31.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import calendar
import logging
import re

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

EMAIL = re.compile(r"[A-Za-z0-9._\-]+@[A-Za-z0-9-]*\.[a-z]{2,3}")

SEARCH_TERM = re.compile(r".*search.*")

DISCOUNT_CSV = re.compile(r"[^,\s]+(\s*,\s*[^,\s]+)*")

DATE_NOTATION = re.compile(
    r"(?P<month>[1-9]|1[0-2])/(?P<day>[1-9]|[12][0-9]|3[01])(?:/(?P<year>[0-9]{4}))?"
)

NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")

STRING = re.compile(r"\"([^\"\\\n\r]|\\[bfnrt'\"\\])*\"")

# Registry used by the plcregex command
PATTERNS: dict[str, re.Pattern] = {
    "EMAIL": EMAIL,
    "SEARCH_TERM": SEARCH_TERM,
    "DISCOUNT_CSV": DISCOUNT_CSV,
    "DATE_NOTATION": DATE_NOTATION,
    "NUMBER": NUMBER,
    "STRING": STRING,
}


# =============================================================================
# Match Helpers
# =============================================================================

def get_groups(match: re.Match) -> dict[str, str]:
    """
    Return the groups that took part in a match, in group order.

    Each key is the group name if the group is named, otherwise its index
    as a string. Groups that did not participate are left out.

        >>> get_groups(DATE_NOTATION.fullmatch("3/14"))
        {'month': '3', 'day': '14'}
    """
    names = {index: name for name, index in match.re.groupindex.items()}
    groups = {}
    for index in range(1, match.re.groups + 1):
        value = match.group(index)
        if value is not None:
            groups[names.get(index, str(index))] = value
    return groups


def match_date(text: str) -> Optional[dict[str, str]]:
    """
    Match DATE_NOTATION and check the day exists in that month.

    Without a year, February 29 is accepted. Returns the groups of a
    valid date, or None.
    """
    match = DATE_NOTATION.fullmatch(text)
    if match is None:
        return None

    groups = get_groups(match)
    month = int(groups["month"])
    day = int(groups["day"])

    if "year" in groups:
        year = int(groups["year"])
        if year == 0:
            return None
    else:
        year = 2000  # any leap year
    if day > calendar.monthrange(year, month)[1]:
        logger.debug(f"Rejected {text!r}: month {month} has no day {day}")
        return None
    return groups


# =============================================================================
# File Filter
# =============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class RegexFileFilter:
    """
    Accept paths whose name (or whole path) fully matches a pattern.

    Two filters are equal when their pattern text and mode are equal.

    Usage:
        java_sources = RegexFileFilter(re.compile(r".*\\.java"))
        accepted = [p for p in Path("src").iterdir() if java_sources(p)]

    Attributes:
        pattern: Compiled regular expression
        filename: Match only the final path component when True,
                  the full path string otherwise
    """
    pattern: re.Pattern
    filename: bool = True

    def __call__(self, path: Union[str, Path]) -> bool:
        path = Path(path)
        target = path.name if self.filename else str(path)
        return self.pattern.fullmatch(target) is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, RegexFileFilter):
            return NotImplemented
        return (self.pattern.pattern, self.filename) == (other.pattern.pattern, other.filename)

    def __hash__(self) -> int:
        return hash((self.pattern.pattern, self.filename))

    def __repr__(self) -> str:
        return f"RegexFileFilter(regex={self.pattern.pattern!r}, filename={self.filename})"


def list_files(directory: Union[str, Path], file_filter: RegexFileFilter) -> list[Path]:
    """
    List the entries of directory accepted by file_filter, sorted by name.

    Raises:
        FileNotFoundError: If directory does not exist
        NotADirectoryError: If directory is a file
    """
    return sorted(entry for entry in Path(directory).iterdir() if file_filter(entry))


def list_python_files(directory: Union[str, Path]) -> list[Path]:
    """List the .py entries of a directory."""
    return list_files(directory, RegexFileFilter(re.compile(r".*\.py")))
