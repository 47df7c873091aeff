"""Tests for the mly command-line entry point."""

import os

from mainly.tests.utils import run_cli


def test_run_script(tmp_path):
    script = tmp_path / "hello.mly"
    script.write_text('print "hello"\nprintcal 2 + 3 * 4\n', encoding="utf-8")
    result = run_cli(str(script))
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["hello", "20"]
    assert result.stderr == ""


def test_script_is_read_as_utf8(tmp_path):
    script = tmp_path / "utf8.mly"
    script.write_text('print "héllo wörld ✓"\n', encoding="utf-8")
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    result = run_cli(str(script), env=env)
    assert result.stdout.splitlines() == ["héllo wörld ✓"]


def test_diagnostic_goes_to_stderr(tmp_path):
    script = tmp_path / "bad.mly"
    script.write_text("42\n", encoding="utf-8")
    result = run_cli(str(script))
    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr.strip() == "ERROR[0003] Unexpected token in line 1"


def test_fatal_error_exit_status(tmp_path):
    script = tmp_path / "zero.mly"
    script.write_text("printcal 5 / 0\n", encoding="utf-8")
    result = run_cli(str(script))
    assert result.returncode == 2
    assert result.stdout == ""
    assert "DivisionByZeroError: Division by zero on line 1" in result.stderr


def test_debug_token_dump(tmp_path):
    script = tmp_path / "debug.mly"
    script.write_text("printcal 1\n", encoding="utf-8")
    env = {**os.environ, "MLYDEBUG": "1"}
    result = run_cli(str(script), env=env)
    assert result.returncode == 0
    assert "Tokens:" in result.stdout
    assert "Token(PRINTCAL, 'printcal', line=1)" in result.stdout
    assert result.stdout.strip().splitlines()[-1] == "1"


def test_help():
    result = run_cli("--help")
    assert result.returncode == 0
    assert "mly <script.mly>" in result.stdout


def test_too_many_arguments():
    result = run_cli("a.mly", "b.mly")
    assert result.returncode == 1
    assert "Usage:" in result.stdout


def test_repl_runs_each_line():
    result = run_cli(stdin='print "hi"\nprintcal 1 / 4\nprintcal +\nexit\n')
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert ">>> hi" in lines
    assert ">>> 0.25" in lines
    assert ">>> ERROR[0001] Use print instead of printcal in line 1" in lines
