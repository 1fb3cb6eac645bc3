#!/usr/bin/env python3
"""Entry point for running a single day's puzzle solver.

Reads the whole input file, solves the requested part, and writes exactly
one answer line to stdout. Logs and diagnostics go to stderr; any failure
exits with status 1.

Usage:
    python run_puzzle.py --day 9 --input data
    python run_puzzle.py --day 9 --input data --part 2
    python run_puzzle.py --day 7 --input data --config config.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from dacite import DaciteError

from src.config import DEFAULT_CONFIG, PuzzleConfig, config_from_json, config_hash
from src.errors import PuzzleError
from src.solutions import PARTS, SOLVERS, solve

log = logging.getLogger(__name__)


def load_config(config_path: Path | None) -> PuzzleConfig:
    """Load a JSON config, or the defaults when no path is given."""
    if config_path is None:
        return DEFAULT_CONFIG
    config = config_from_json(config_path.read_text(encoding="utf-8"))
    log.info("Config loaded from %s", config_path)
    return config


def run_puzzle(
    day: int,
    input_path: Path,
    part: int = 1,
    config_path: Path | None = None,
) -> int | str:
    """Solve one day's puzzle from an input file.

    Args:
        day: Puzzle day number.
        input_path: Path to the UTF-8 puzzle input.
        part: 1 or 2.
        config_path: Optional JSON config overriding DEFAULT_CONFIG.

    Returns:
        The answer as an int, or a str for the crate puzzle.
    """
    config = load_config(config_path)
    log.info("Config hash: %s", config_hash(config))
    text = input_path.read_text(encoding="utf-8")
    return solve(day, text, part, config)


def main() -> None:
    parser = argparse.ArgumentParser(description="Solve one day's puzzle")
    parser.add_argument(
        "--day",
        type=int,
        required=True,
        choices=sorted(SOLVERS),
        help="Puzzle day number",
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to the puzzle input file",
    )
    parser.add_argument(
        "--part",
        type=int,
        default=1,
        choices=PARTS,
        help="Which part to solve (default: 1)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON config overriding the defaults",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging; basicConfig writes to stderr
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)
    config_path = Path(args.config) if args.config else None

    try:
        answer = run_puzzle(args.day, input_path, args.part, config_path)
    except (PuzzleError, DaciteError, OSError, ValueError):
        log.exception("Day %d part %d failed", args.day, args.part)
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
