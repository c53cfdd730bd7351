"""Tests for the CLI: end-to-end runs, silent setup failures, options."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gitannotate import __version__
from gitannotate.cli import app

runner = CliRunner()

STDIN = "docs/new.md\ndocs/old.md\nsrc/util.py\nsrc/helpers.py\nnotes.md\nREADME.md\n"


@pytest.fixture(autouse=True)
def in_tmp(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"gitannotate {__version__}" in result.output

    def test_print_config(self):
        result = runner.invoke(app, ["--print-config"])
        assert result.exit_code == 0
        assert "[glyphs]" in result.output


class TestAnnotate:
    def test_full_run(self, report_file: Path, tmp_path: Path):
        manifest = tmp_path / "renames"
        result = runner.invoke(app, [str(report_file), str(manifest)], input=STDIN)
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "\x1b[32m●\x1b[0m docs/new.md",
            "\x1b[31m●\x1b[0m docs/old.md",
            "\x1b[31m←\x1b[0m src/util.py\t\t\x1b[33m(87%)\x1b[0m",
            "\x1b[32m→\x1b[0m src/helpers.py\t\t\x1b[33m(87%)\x1b[0m",
            "\x1b[34m▪\x1b[0m notes.md",
            "\x1b[34m▪\x1b[0m README.md",
        ]
        assert manifest.read_text(encoding="utf-8") == (
            "src/util.py::src/helpers.py::87%\n"
            "notes.txt::notes.md::\n"
        )

    def test_same_output_twice(self, report_file: Path, tmp_path: Path):
        args = [str(report_file), str(tmp_path / "renames")]
        first = runner.invoke(app, args, input=STDIN)
        second = runner.invoke(app, args, input=STDIN)
        assert first.stdout_bytes == second.stdout_bytes

    def test_no_color(self, report_file: Path, tmp_path: Path):
        result = runner.invoke(
            app, ["--no-color", str(report_file), str(tmp_path / "renames")], input="src/util.py\n",
        )
        assert result.exit_code == 0
        assert result.stdout == "← src/util.py\t\t(87%)\n"

    def test_undecodable_stdin_line_skipped(self, report_file: Path, tmp_path: Path):
        result = runner.invoke(
            app, [str(report_file), str(tmp_path / "renames")], input=b"docs/new.md\n\xff\xfe\nREADME.md\n",
        )
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 2

    def test_empty_stdin(self, report_file: Path, tmp_path: Path):
        result = runner.invoke(app, [str(report_file), str(tmp_path / "renames")], input="")
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_config_glyphs(self, report_file: Path, tmp_path: Path):
        (tmp_path / ".gitannotate.toml").write_text(
            '[glyphs]\ncreated = "+"\n[output]\ncolor = "never"\n', encoding="utf-8",
        )
        result = runner.invoke(app, [str(report_file), str(tmp_path / "renames")], input="docs/new.md\n")
        assert result.stdout == "+ docs/new.md\n"

    def test_ls_colors_applied(self, report_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("LS_COLORS", "di=01;34")
        result = runner.invoke(app, [str(report_file), str(tmp_path / "renames")], input="docs/new.md\n")
        assert result.stdout == "\x1b[32m●\x1b[0m \x1b[01;34mdocs/\x1b[0mnew.md\n"

    def test_overlong_path_does_not_stop_stream(self, report_file: Path, tmp_path: Path):
        leaf = "y" * 300
        result = runner.invoke(
            app, ["--no-color", str(report_file), str(tmp_path / "renames")], input=f"a\n{leaf}\nb\n",
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["▪ a", f"▪ {leaf}", "▪ b"]


class TestSilentFailures:
    @pytest.mark.parametrize("args", [[], ["only-one"], ["a", "b", "c"]])
    def test_wrong_argument_count(self, args):
        result = runner.invoke(app, args, input="x\n")
        assert result.exit_code == 2
        assert result.stdout == ""

    def test_missing_report(self, tmp_path: Path):
        manifest = tmp_path / "renames"
        result = runner.invoke(app, [str(tmp_path / "nope"), str(manifest)], input="x\n")
        assert result.exit_code == 2
        assert result.stdout == ""
        assert not manifest.exists()

    def test_uncreatable_manifest(self, report_file: Path, tmp_path: Path):
        result = runner.invoke(
            app, [str(report_file), str(tmp_path / "missing" / "renames")], input="x\n",
        )
        assert result.exit_code == 2
        assert result.stdout == ""

    def test_bad_config(self, report_file: Path, tmp_path: Path):
        (tmp_path / ".gitannotate.toml").write_text('[colors]\ncreated = "not_a_colour"\n')
        result = runner.invoke(app, [str(report_file), str(tmp_path / "renames")], input="x\n")
        assert result.exit_code == 2
        assert "Config error" in result.output

    def test_bad_separator_type(self, report_file: Path, tmp_path: Path):
        (tmp_path / ".gitannotate.toml").write_text("[output]\npercent_separator = 5\n")
        result = runner.invoke(app, [str(report_file), str(tmp_path / "renames")], input="src/util.py\n")
        assert result.exit_code == 2
        assert "percent_separator" in result.output
