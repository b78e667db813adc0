"""Tests for md2html.cli module."""

import pytest

from md2html.cli import main


def _exit_code(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestMain:
    """Exit codes and console output."""

    def test_no_args_prints_usage(self, tmp_env, capsys):
        assert _exit_code([]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Usage: md2html [--font <font-name>] [--title <title>] <input.md>")
        assert "Example: md2html --font 'Roboto' file.md" in out

    def test_wrong_extension(self, tmp_env, capsys):
        (tmp_env / "notes.txt").write_text("# hi\n", encoding="utf-8")
        assert _exit_code(["notes.txt"]) == 1
        assert "Error: Input file must have .md extension" in capsys.readouterr().out
        assert not (tmp_env / "notes.html").exists()

    def test_missing_file(self, tmp_env, capsys):
        assert _exit_code(["absent.md"]) == 1
        assert "Error: failed to read input file" in capsys.readouterr().out

    def test_success(self, tmp_env, capsys):
        (tmp_env / "guide.md").write_text("[Guide](./setup.md)\n", encoding="utf-8")
        assert _exit_code(["guide.md"]) == 0
        assert "Successfully converted guide.md to guide.html" in capsys.readouterr().out
        html = (tmp_env / "guide.html").read_text(encoding="utf-8")
        assert 'href="./setup.html"' in html
        assert "family=Open+Sans:" in html
        assert "<title></title>" in html

    def test_font_and_title_flags(self, tmp_env):
        (tmp_env / "doc.md").write_text("text\n", encoding="utf-8")
        assert _exit_code(["--font", "Roboto Mono", "--title", "My Document", "doc.md"]) == 0
        html = (tmp_env / "doc.html").read_text(encoding="utf-8")
        assert "family=Roboto+Mono:" in html
        assert "font-family: 'Roboto Mono', sans-serif;" in html
        assert "<title>My Document</title>" in html

    def test_missing_image_exit_zero(self, tmp_env):
        (tmp_env / "doc.md").write_text("![x](nope.png)\n", encoding="utf-8")
        assert _exit_code(["doc.md"]) == 0
        assert (tmp_env / "doc.html").exists()

    def test_version(self, capsys):
        assert _exit_code(["--version"]) == 0
        assert capsys.readouterr().out.startswith("md2html ")
