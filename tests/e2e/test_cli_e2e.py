from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies external behavior by invoking the entry point script via
subprocess: exit codes, stdout/stderr content and the stdin prompt.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "wordtally" / "main.py"


def run_cli(
        args: List[str],
        home: Path,
        stdin: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without installation, and redirects HOME to keep user data isolated.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path(tmp_path: Path, sample_file: Path) -> None:
    result = run_cli(["-i", str(sample_file)], home=tmp_path)

    assert result.returncode == 0, result.stderr
    assert "Count: 5\tthe" in result.stdout
    assert "Total Words: 22" in result.stdout
    assert "Nobody knows why the fox left." in result.stdout


def test_cli_reads_path_from_stdin(tmp_path: Path, sample_file: Path) -> None:
    result = run_cli([], home=tmp_path, stdin=f"{sample_file}\n")

    assert result.returncode == 0, result.stderr
    assert "Enter name of input file:" in result.stdout
    assert "Total Words: 22" in result.stdout


def test_cli_missing_input(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "nope.txt")], home=tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_json(tmp_path: Path, sample_file: Path) -> None:
    result = run_cli(["-i", str(sample_file), "--json", "-n", "1"], home=tmp_path)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["top_word"] == "the"
    assert data["last_sentence"] == "Nobody knows why the fox left."


def test_cli_log_file(tmp_path: Path, sample_file: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    result = run_cli(["-i", str(sample_file), "--log-file", str(log_file)], home=tmp_path)

    assert result.returncode == 0, result.stderr
    assert "Analysis complete" in log_file.read_text(encoding="utf-8")


def test_module_execution(tmp_path: Path, sample_file: Path) -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(tmp_path)

    result = subprocess.run(
        [sys.executable, "-m", "wordtally", "-i", str(sample_file), "-n", "1"],
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )

    assert result.returncode == 0, result.stderr
    assert "Count: 5\tthe" in result.stdout
