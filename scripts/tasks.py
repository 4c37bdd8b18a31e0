"""Development tasks: ``python scripts/tasks.py [setup|lint|typecheck|test|ci]``."""

from __future__ import annotations

import argparse
import subprocess
from collections.abc import Sequence

PATHS = ["src", "tests", "examples"]

TASKS: dict[str, list[list[str]]] = {
    "setup": [["uv", "sync", "--all-groups", "--extra", "test"]],
    "lint": [
        ["uv", "run", "ruff", "check", *PATHS],
        ["uv", "run", "black", "--check", *PATHS],
    ],
    "typecheck": [["uv", "run", "mypy", "src"]],
    "test": [["uv", "run", "pytest", "-q"]],
}
TASKS["ci"] = TASKS["lint"] + TASKS["typecheck"] + TASKS["test"]


def run(cmd: Sequence[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd).returncode


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("task", nargs="?", default="ci", choices=sorted(TASKS))
    args = parser.parse_args(argv)

    codes = [run(cmd) for cmd in TASKS[args.task]]
    return 0 if all(code == 0 for code in codes) else 1


if __name__ == "__main__":
    raise SystemExit(main())
