"""
Classification Pattern Tests
============================

Table-driven tests for the patterns in plc_lexer.regex, the group helper,
date validation and the regex file filter.
"""

import re

import pytest

from plc_lexer.regex import (
    DATE_NOTATION,
    DISCOUNT_CSV,
    EMAIL,
    NUMBER,
    PATTERNS,
    SEARCH_TERM,
    STRING,
    RegexFileFilter,
    get_groups,
    list_files,
    list_python_files,
    match_date,
)


def matches(pattern: re.Pattern, text: str) -> bool:
    return pattern.fullmatch(text) is not None


# =============================================================================
# Pattern Tables
# =============================================================================

class TestEmail:

    @pytest.mark.parametrize("text", [
        "thelegend27@gmail.com",
        "otherdomain@ufl.edu",
        "first.last@ufl.edu",
        "love_rosie92@gmail.com",
        "sean.o.connery@gmail.com",
    ])
    def test_matching(self, text):
        assert matches(EMAIL, text)

    @pytest.mark.parametrize("text", [
        "otherdomain@cise.ufl.edu",   # subdomain
        "missingdot@gmailcom",
        "symbols#$%@gmail.com",
        "someone@ufl.e",              # one-letter tld
        "someone$gmail.com",          # no @
        "someone@gmail..com",
    ])
    def test_non_matching(self, text):
        assert not matches(EMAIL, text)


class TestSearchTerm:

    @pytest.mark.parametrize("text", [
        "search",
        'google search "lmgtfy"',
        "1234567890search123",
        " search",
        "research",
    ])
    def test_matching(self, text):
        assert matches(SEARCH_TERM, text)

    @pytest.mark.parametrize("text", [
        "use arch",
        "toSEARCH me",
        "serach",
        "s e a rch",
        "se-arch",
    ])
    def test_non_matching(self, text):
        assert not matches(SEARCH_TERM, text)


class TestDiscountCsv:

    @pytest.mark.parametrize("text", [
        "single",
        "one,two,three",
        "first , second",
        "entry1,entry2 , entry3 ,entry4",
        "yes   ,   no",
    ])
    def test_matching(self, text):
        assert matches(DISCOUNT_CSV, text)

    @pytest.mark.parametrize("text", [
        "first,,second",
        "entry1, ",
        "entry 1, entry2",
        ", entry1",
        "first, , third",
    ])
    def test_non_matching(self, text):
        assert not matches(DISCOUNT_CSV, text)


class TestDateNotation:

    @pytest.mark.parametrize("text, groups", [
        ("3/14", {"month": "3", "day": "14"}),
        ("3/14/2026", {"month": "3", "day": "14", "year": "2026"}),
        ("1/1", {"month": "1", "day": "1"}),
        ("10/31/2023", {"month": "10", "day": "31", "year": "2023"}),
    ])
    def test_matching_with_groups(self, text, groups):
        match = DATE_NOTATION.fullmatch(text)
        assert match is not None
        assert get_groups(match) == groups

    @pytest.mark.parametrize("text", [
        "03/14",
        "3/14/",
        "10/31/-2023",
        "0/10/2023",
        "1/0/2020",
        "1/1/0",
        "3/32",
    ])
    def test_non_matching(self, text):
        assert not matches(DATE_NOTATION, text)

    def test_shape_only_accepts_missing_leap_day(self):
        assert matches(DATE_NOTATION, "2/29/2023")


class TestMatchDate:
    """Calendar validation on top of DATE_NOTATION."""

    def test_leap_year(self):
        assert match_date("2/29/2024") == {"month": "2", "day": "29", "year": "2024"}

    def test_not_a_leap_year(self):
        assert match_date("2/29/2023") is None

    def test_century_rule(self):
        assert match_date("2/29/1900") is None
        assert match_date("2/29/2000") is not None

    def test_thirty_day_month(self):
        assert match_date("4/31") is None
        assert match_date("4/30/2004") is not None

    def test_leap_day_without_year(self):
        assert match_date("2/29") == {"month": "2", "day": "29"}

    def test_year_zero(self):
        assert match_date("1/1/0000") is None

    def test_bad_shape(self):
        assert match_date("13/1") is None


class TestNumber:

    @pytest.mark.parametrize("text", ["0", "123", "-42", "5.31", "5e4", "+1.5E-10"])
    def test_matching(self, text):
        assert matches(NUMBER, text)

    @pytest.mark.parametrize("text", ["3..33", "--3", "2e2.3", "2e2e2", "5.", ".5"])
    def test_non_matching(self, text):
        assert not matches(NUMBER, text)


class TestString:

    @pytest.mark.parametrize("text", [
        '""',
        '"hello"',
        '"hello spaces"',
        '"he said \\"hi!\\""',
        '"tabs:\\t"',
    ])
    def test_matching(self, text):
        assert matches(STRING, text)

    @pytest.mark.parametrize("text", [
        '"hello',
        '"odd" quotes"',
        '"\\a"',
        "'hi'",
        'hello"',
        '"line\nbreak"',
    ])
    def test_non_matching(self, text):
        assert not matches(STRING, text)


# =============================================================================
# Helpers
# =============================================================================

class TestGetGroups:

    def test_unnamed_groups_use_index(self):
        match = NUMBER.fullmatch("1.5e3")
        assert get_groups(match) == {"1": ".5", "2": "e3"}

    def test_non_participating_groups_left_out(self):
        assert get_groups(NUMBER.fullmatch("7")) == {}

    def test_registry_contains_all_patterns(self):
        assert set(PATTERNS) == {
            "EMAIL", "SEARCH_TERM", "DISCOUNT_CSV", "DATE_NOTATION", "NUMBER", "STRING",
        }


# =============================================================================
# File Filter
# =============================================================================

class TestRegexFileFilter:

    def test_equality_and_hash(self):
        first = RegexFileFilter(re.compile("first"), True)
        second = RegexFileFilter(re.compile("second"), False)
        assert first != second
        assert hash(first) != hash(second)
        assert repr(first) != repr(second)

    def test_equal_filters(self):
        a = RegexFileFilter(re.compile(r".*\.py"))
        b = RegexFileFilter(re.compile(r".*\.py"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_mode_distinguishes_filters(self):
        assert RegexFileFilter(re.compile("x"), True) != RegexFileFilter(re.compile("x"), False)

    def test_repr(self):
        file_filter = RegexFileFilter(re.compile("a+"), filename=False)
        assert repr(file_filter) == "RegexFileFilter(regex='a+', filename=False)"

    def test_name_mode(self, tmp_path):
        file_filter = RegexFileFilter(re.compile(r".*\.java"))
        assert file_filter(tmp_path / "Main.java")
        assert not file_filter(tmp_path / "Main.java.bak")

    def test_path_mode(self):
        file_filter = RegexFileFilter(re.compile(r"src/.*\.java"), filename=False)
        assert file_filter("src/Main.java")
        assert not file_filter("test/Main.java")

    def test_list_files(self, tmp_path):
        for name in ("b.py", "a.py", "notes.txt", "c.pyc"):
            (tmp_path / name).write_text("")
        assert [p.name for p in list_python_files(tmp_path)] == ["a.py", "b.py"]

    def test_list_files_custom_filter(self, tmp_path):
        (tmp_path / "one.txt").write_text("")
        (tmp_path / "two.md").write_text("")
        result = list_files(tmp_path, RegexFileFilter(re.compile(r".*\.txt")))
        assert result == [tmp_path / "one.txt"]

    def test_list_files_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_files(tmp_path / "missing", RegexFileFilter(re.compile(".*")))
