"""Tests for infrastructure.i18n.dotlang."""

import pytest

from infrastructure.i18n.dotlang import DotLangParseError, DotLangParser


@pytest.fixture
def parser():
    return DotLangParser()


@pytest.mark.unit
class TestParseContent:
    def test_pairs(self, parser):
        result = parser.parse_content(";Hello\nBonjour\n\n;Goodbye\nAu revoir\n")
        assert result.strings == {"Hello": "Bonjour", "Goodbye": "Au revoir"}
        assert result.activated is False
        assert result.ignored_strings == []

    def test_active_tag(self, parser):
        result = parser.parse_content("## active ##\n;Hello\nBonjour\n")
        assert result.activated is True

    def test_other_tags_and_comments_are_skipped(self, parser):
        content = (
            "## NOTE: Store listing ##\n"
            "# Translator comment\n"
            ";Hello\n"
            "# comment between source and translation\n"
            "Bonjour\n"
        )
        result = parser.parse_content(content)
        assert result.activated is False
        assert result.strings == {"Hello": "Bonjour"}

    def test_blank_lines_between_source_and_translation(self, parser):
        result = parser.parse_content(";Hello\n\n\nBonjour\n")
        assert result.strings == {"Hello": "Bonjour"}

    def test_ok_marker_is_kept_raw(self, parser):
        result = parser.parse_content(";Firefox\nFirefox {ok}\n")
        assert result.strings == {"Firefox": "Firefox {ok}"}

    def test_source_without_translation(self, parser):
        result = parser.parse_content(";Hello\n;Goodbye\nAu revoir\n;Trailing\n")
        assert result.strings == {"Goodbye": "Au revoir"}
        assert result.ignored_strings == ["Hello", "Trailing"]
        assert result.errors == {"ignoredstrings": ["Hello", "Trailing"]}

    def test_line_without_source_is_ignored(self, parser):
        result = parser.parse_content("Stray line\n;Hello\nBonjour\n")
        assert result.strings == {"Hello": "Bonjour"}

    def test_later_duplicate_wins(self, parser):
        result = parser.parse_content(";Hello\nBonjour\n;Hello\nSalut\n")
        assert result.strings == {"Hello": "Salut"}

    def test_windows_line_endings(self, parser):
        result = parser.parse_content(";Hello\r\nBonjour\r\n")
        assert result.strings == {"Hello": "Bonjour"}

    def test_empty_content(self, parser):
        result = parser.parse_content("")
        assert result.strings == {}
        assert result.activated is False


@pytest.mark.unit
class TestParse:
    def test_parse_file(self, parser, tmp_path):
        path = tmp_path / "fr" / "main.lang"
        path.parent.mkdir()
        path.write_text("## active ##\n;Hello\nBonjour\n", encoding="utf-8")

        result = parser.parse(path)

        assert result.activated is True
        assert result.strings == {"Hello": "Bonjour"}

    def test_parse_accepts_str_path(self, parser, tmp_path):
        path = tmp_path / "main.lang"
        path.write_text(";Hello\nHallo\n", encoding="utf-8")
        assert parser.parse(str(path)).strings == {"Hello": "Hallo"}

    def test_missing_file(self, parser, tmp_path):
        path = tmp_path / "missing.lang"
        with pytest.raises(DotLangParseError) as exc_info:
            parser.parse(path)
        assert exc_info.value.path == path
        assert "File not found" in str(exc_info.value)

    def test_invalid_encoding(self, parser, tmp_path):
        path = tmp_path / "latin1.lang"
        path.write_bytes(";Caf\xe9\nCaf\xe9\n".encode("latin-1"))
        with pytest.raises(DotLangParseError, match="Failed to read"):
            parser.parse(path)

    def test_directory_is_unreadable(self, parser, tmp_path):
        with pytest.raises(DotLangParseError):
            parser.parse(tmp_path)
