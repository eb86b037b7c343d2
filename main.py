"""Main orchestration script for generating reference documents."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate reference documents for every assembly in a directory."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documents",
    )
    parser.add_argument(
        "--metadata-dir",
        default="metadata",
        help="Directory containing <Assembly>.yml and <Assembly>.xml files",
    )
    parser.add_argument(
        "--format",
        help="Output format (markdown or html)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with document generation.\n")

    metadata_dir = Path(args.metadata_dir)
    yml_files = sorted(metadata_dir.glob("*.yml"))
    if not yml_files:
        print(f"No assembly metadata (*.yml) found under: {metadata_dir}")
        sys.exit(1)

    print("--- Generating reference documents ---")
    cmd: list[str | Path] = [sys.executable, "-m", "documark", *yml_files]
    if args.format:
        cmd.extend(["--format", args.format])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print("\nSUCCESS: Documents generated in ./Generated")


if __name__ == "__main__":
    main()
