"""Development script: lint, format-check and test the package."""

import argparse
import subprocess
import sys

CHECKS = [
    ("Ruff Linting", ["uv", "run", "ruff", "check"]),
    ("Ruff Format Check", ["uv", "run", "ruff", "format", "--check"]),
    ("Tests", ["uv", "run", "pytest", "-q"]),
]

FIXES = [
    ("Ruff Formatting", ["uv", "run", "ruff", "format"]),
    ("Ruff Fixes", ["uv", "run", "ruff", "check", "--fix"]),
]


def run_step(step_name: str, command: list[str]) -> None:
    """Run one step, exiting with its status if it fails."""
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode:
        print(f"\nFailed: {step_name}")
        sys.exit(result.returncode)


def main() -> None:
    """Run the fixers (unless --ci) and then every check."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only verify; do not rewrite files",
    )
    args = parser.parse_args()

    steps = CHECKS if args.ci else FIXES + CHECKS
    for step_name, command in steps:
        run_step(step_name, command)
    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
