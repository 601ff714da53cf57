#!/usr/bin/env python3
"""Type check and run both test suites with their coverage gates."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path

# (tests path, covered package, minimum coverage percent)
SUITES: tuple[tuple[str, str, int], ...] = (
    ("tests/buildrules", "buildrules", 85),
    ("tests/engine_modules", "engine_modules", 90),
)


def _run(command: list[str], env: dict[str, str]) -> None:
    print("$", " ".join(command), flush=True)
    returncode = subprocess.run(command, env=env, check=False).returncode
    if returncode != 0:
        raise SystemExit(returncode)


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--no-mypy", action="store_true", help="Skip the type check.")
    parser.add_argument(
        "--suite",
        choices=[package for _, package, _ in SUITES],
        action="append",
        help="Run only this suite (repeatable).",
    )
    args = parser.parse_args()

    os.chdir(Path(__file__).resolve().parent.parent)
    env = {**os.environ, "PYTHONPATH": "."}

    if not args.no_mypy:
        _run(["uv", "run", "mypy"], env)
    for tests_path, package, gate in SUITES:
        if args.suite and package not in args.suite:
            continue
        _run(
            [
                "uv",
                "run",
                "pytest",
                tests_path,
                f"--cov={package}",
                "--cov-report=term-missing",
                f"--cov-fail-under={gate}",
            ],
            env,
        )
    print("All checks passed.", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
