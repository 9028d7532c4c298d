"""
Lexer Configuration Tests
=========================
"""

import pytest

from plc_lexer import LexerOptions, tokenize


class TestLexerOptions:

    def test_defaults(self):
        options = LexerOptions()
        assert options.filename == "<input>"
        assert options.comment_marker == "//"
        assert options.collect_trivia is True

    @pytest.mark.parametrize("marker", ["", "a", "_x", "1", "'", '"', " ", "\t"])
    def test_invalid_comment_marker(self, marker):
        with pytest.raises(ValueError):
            LexerOptions(comment_marker=marker)

    @pytest.mark.parametrize("marker", ["#", "--", ";", "%%"])
    def test_valid_comment_marker(self, marker):
        tokens = tokenize(f"x {marker} ignored", LexerOptions(comment_marker=marker))
        assert [t.literal for t in tokens] == ["x", ""]


class TestFromEnv:

    def test_no_environment(self, monkeypatch):
        monkeypatch.delenv("PLC_LEXER_FILENAME", raising=False)
        monkeypatch.delenv("PLC_LEXER_COMMENT_MARKER", raising=False)
        assert LexerOptions.from_env() == LexerOptions()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PLC_LEXER_FILENAME", "main.plc")
        monkeypatch.setenv("PLC_LEXER_COMMENT_MARKER", "#")
        options = LexerOptions.from_env()
        assert options.filename == "main.plc"
        assert options.comment_marker == "#"

    def test_invalid_marker_ignored(self, monkeypatch):
        monkeypatch.delenv("PLC_LEXER_FILENAME", raising=False)
        monkeypatch.setenv("PLC_LEXER_COMMENT_MARKER", "rem")
        assert LexerOptions.from_env().comment_marker == "//"
