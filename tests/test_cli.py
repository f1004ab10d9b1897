import os
from pathlib import Path
from click.testing import CliRunner

from findr import __version__
from findr.cli.interface import main_cli


def _lines(text):
    return [line for line in text.splitlines() if line]


def test_cli_type_and_name_filters(sample_tree: Path):
    runner = CliRunner()
    root = str(sample_tree)

    result = runner.invoke(main_cli, [root, "-t", "f", "-n", r"\.txt$"], catch_exceptions=False)

    assert result.exit_code == 0
    assert set(_lines(result.stdout)) == {os.path.join(root, "a.txt"), os.path.join(root, "sub", "c.txt")}
    assert len(_lines(result.stdout)) == 2

def test_cli_defaults_to_current_directory(tmp_path: Path, monkeypatch):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(main_cli, [], catch_exceptions=False)

    assert result.exit_code == 0
    assert _lines(result.stdout) == [".", os.path.join(".", "a.txt"), os.path.join(".", "sub")]

def test_cli_repeated_types_are_or_combined(sample_tree: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(sample_tree), "--type", "d", "--type", "f"], catch_exceptions=False)
    assert result.exit_code == 0
    assert len(_lines(result.stdout)) == 5

def test_cli_invalid_pattern_fails_before_walking(sample_tree: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(sample_tree), "-n", "("])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Error: invalid name pattern '('" in result.stderr

def test_cli_rejects_unknown_type_tag(sample_tree: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(sample_tree), "-t", "x"])
    assert result.exit_code == 2
    assert result.stdout == ""

def test_cli_reports_traversal_errors_and_keeps_going(sample_tree: Path, tmp_path: Path):
    runner = CliRunner()
    missing = str(tmp_path / "missing")

    result = runner.invoke(main_cli, [missing, str(sample_tree / "a.txt")], catch_exceptions=False)

    assert result.exit_code == 1
    assert _lines(result.stdout) == [str(sample_tree / "a.txt")]
    assert f"Error: {missing}:" in result.stderr

def test_cli_summary_goes_to_stderr(sample_tree: Path):
    runner = CliRunner()
    result = runner.invoke(main_cli, [str(sample_tree), "-t", "d", "--summary"], catch_exceptions=False)
    assert result.exit_code == 0
    assert _lines(result.stdout) == [str(sample_tree), str(sample_tree / "sub")]
    assert "Entries visited: 5" in result.stderr
    assert "Entries matched: 2" in result.stderr

def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(main_cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
