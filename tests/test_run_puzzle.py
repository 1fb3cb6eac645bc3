"""End-to-end tests for the run_puzzle.py command-line entry point.

Runs the script in a subprocess so stdout/stderr separation and exit
status are checked exactly as a user would see them.
"""

import subprocess
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from src.config import DEFAULT_CONFIG, RopeConfig
from src.config.serialization import config_to_json

ROPE_SAMPLE = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
CRATES = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)

REPO_ROOT = Path(__file__).resolve().parent.parent


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "run_puzzle.py", *args],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=REPO_ROOT,
    )


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


class TestAnswers:
    """A successful run prints exactly one answer line."""

    def test_rope_part_one(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", ROPE_SAMPLE)
        result = _run("--day", "9", "--input", str(data))
        assert result.returncode == 0
        assert result.stdout == "13\n"

    def test_crates_part_two(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", CRATES)
        result = _run("--day", "5", "--input", str(data), "--part", "2")
        assert result.returncode == 0
        assert result.stdout == "MCD\n"

    def test_logs_go_to_stderr(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", ROPE_SAMPLE)
        result = _run("--day", "9", "--input", str(data), "--verbose")
        assert result.stdout == "13\n"
        assert "Config hash" in result.stderr

    def test_config_file(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", ROPE_SAMPLE)
        cfg = replace(DEFAULT_CONFIG, rope=RopeConfig(short_knots=2, long_knots=2))
        config_path = _write(tmp_path, "config.json", config_to_json(cfg))
        result = _run(
            "--day", "9", "--input", str(data), "--part", "2",
            "--config", str(config_path),
        )
        assert result.returncode == 0
        assert result.stdout == "13\n"


class TestFailures:
    """Failures exit non-zero with the reason on stderr only."""

    def test_missing_input(self, tmp_path: Path) -> None:
        result = _run("--day", "9", "--input", str(tmp_path / "nope"))
        assert result.returncode == 1
        assert result.stdout == ""
        assert "not found" in result.stderr

    def test_malformed_input(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", "R 1\nQ 2\n")
        result = _run("--day", "9", "--input", str(data))
        assert result.returncode == 1
        assert result.stdout == ""
        assert "ParseError" in result.stderr

    def test_underflow(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", "[A]\n 1 \n\nmove 2 from 1 to 1\n")
        result = _run("--day", "5", "--input", str(data))
        assert result.returncode == 1
        assert "UnderflowError" in result.stderr

    def test_bad_config(self, tmp_path: Path) -> None:
        data = _write(tmp_path, "data", ROPE_SAMPLE)
        config_path = _write(tmp_path, "config.json", '{"bogus": 1}')
        result = _run("--day", "9", "--input", str(data), "--config", str(config_path))
        assert result.returncode == 1
        assert result.stdout == ""

    @pytest.mark.parametrize("day", ["0", "10"])
    def test_unknown_day(self, tmp_path: Path, day: str) -> None:
        data = _write(tmp_path, "data", ROPE_SAMPLE)
        result = _run("--day", day, "--input", str(data))
        assert result.returncode == 2
