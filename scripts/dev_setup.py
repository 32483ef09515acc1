#!/usr/bin/env python3
"""Install the dev extras, then run lint, type and test checks."""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

CHECKS = [
    ("ruff", [sys.executable, "-m", "ruff", "check", "tripdash_app", "tests"]),
    ("mypy", [sys.executable, "-m", "mypy", "tripdash_app"]),
    ("pytest", [sys.executable, "-m", "pytest", "-q"]),
]


def run_step(name: str, cmd: list[str]) -> bool:
    """Run one step from the project root; print its output on failure."""
    print(f"[{name}] {' '.join(cmd[2:])}")
    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)
    if result.returncode != 0:
        print(result.stdout)
        print(result.stderr, file=sys.stderr)
        print(f"[{name}] failed with exit code {result.returncode}")
        return False
    return True


def main() -> int:
    install = [sys.executable, "-m", "pip", "install", "-e", ".[dev]"]
    if not run_step("install", install):
        return 1

    failed = [name for name, cmd in CHECKS if not run_step(name, cmd)]
    if failed:
        print(f"Checks failed: {', '.join(failed)}")
        return 1

    print("All checks passed. Try: python examples/basic_usage.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
