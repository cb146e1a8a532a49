"""Tests for language detection and file headers."""

import pytest

from fim_prompt.headers import file_header
from fim_prompt.languages import LANGUAGES, LanguageComment, LanguageDescriptor, detect_language


class TestDetectLanguage:
    """Tests for detect_language."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/src/app.py", "python"),
            ("/src/App.PY", "python"),
            ("/src/index.ts", "typescript"),
            ("/src/main.rs", "rust"),
            ("C:\\work\\query.sql", "sql"),
            ("/repo/Dockerfile", "dockerfile"),
            ("/repo/Makefile", "makefile"),
        ],
    )
    def test_by_path(self, path, expected):
        """File names and extensions map to table keys."""
        assert detect_language(path) == expected

    def test_declared_language_wins(self):
        """A known declared id beats the extension."""
        assert detect_language("/src/app.py", "ruby") == "ruby"

    def test_declared_language_lowercased(self):
        """Notebook kernel names such as "R" match lowercase keys."""
        assert detect_language("/nb/stats.ipynb", "R") == "r"

    def test_notebook_extension_has_no_language(self):
        """A .ipynb path alone says nothing about the kernel language."""
        assert detect_language("/nb/stats.ipynb") is None

    def test_unknown_declared_language_falls_back_to_extension(self):
        """An unknown declared id falls back to the path."""
        assert detect_language("/src/app.py", "plaintext") == "python"

    def test_unknown_path(self):
        """Unmatched paths return None."""
        assert detect_language("/src/README") is None

    def test_custom_table(self):
        """A custom table replaces the built-in one."""
        table = {"zig": LanguageDescriptor("Zig", (".zig",), comment=LanguageComment("//"))}
        assert detect_language("/a/b.zig", table=table) == "zig"
        assert detect_language("/a/b.py", table=table) is None


class TestLanguageTable:
    """Tests for the built-in LANGUAGES table."""

    def test_comment_start(self):
        """Line comment tokens are exposed as comment_start."""
        assert LANGUAGES["python"].comment_start == "#"
        assert LANGUAGES["go"].comment_start == "//"

    def test_no_comment_syntax(self):
        """Languages without comments have no comment_start."""
        assert LANGUAGES["json"].comment_start is None


class TestFileHeader:
    """Tests for file_header."""

    def test_line_comment_header(self):
        """Line-comment languages get two comment lines."""
        result = file_header("code", "/a/b.py", LANGUAGES["python"])
        assert result == "# Path: /a/b.py\n# Language: Python\ncode"

    def test_block_comment_header(self):
        """Block-comment languages close each line."""
        result = file_header("<p>", "/a/index.html", LANGUAGES["html"])
        assert result == "<!-- Path: /a/index.html -->\n<!-- Language: HTML -->\n<p>"

    def test_no_language(self):
        """No language leaves the prefix untouched."""
        assert file_header("code", "/a/b", None) == "code"

    def test_language_without_comment_syntax(self):
        """A language without comments leaves the prefix untouched."""
        assert file_header("{}", "/a/b.json", LANGUAGES["json"]) == "{}"
