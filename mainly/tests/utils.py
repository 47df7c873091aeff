"""
Utility functions shared across Mainly Language tests.
"""
from pathlib import Path
import subprocess
import sys

from mainly.lexer import Lexer

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def token_pairs(source: str) -> list[tuple]:
    """
    Lex source code and return ``(type, value)`` pairs up to and including EOF.
    """
    return [(tok.type, tok.value) for tok in Lexer(source, "<test>")]


def run_cli(*args: str, env=None, stdin: str | None = None) -> subprocess.CompletedProcess:
    """
    Run ``mly.py`` in a subprocess and capture its output.
    """
    return subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "mly.py"), *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=PROJECT_ROOT,
        env=env,
        input=stdin,
        check=False,
    )
