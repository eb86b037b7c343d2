"""Generate reference documents from assembly metadata and XML doc comments.

Each metadata file describes the public surface of one assembly. Its XML
documentation file is looked up next to it (or in --docs-dir) under the same
stem, e.g. Sample.yml and Sample.xml.
"""

import argparse
import logging
from pathlib import Path

from documark.errors import DocumarkError
from documark.get_backend import BACKENDS
from documark.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Generate per-type and per-member reference documents.",
    )
    ap.add_argument(
        "metadata",
        type=Path,
        nargs="+",
        help="Assembly metadata YAML file(s)",
    )
    ap.add_argument(
        "--docs-dir",
        type=Path,
        default=None,
        help="Directory holding <Assembly>.xml doc files (default: beside each YAML)",
    )
    ap.add_argument(
        "--format",
        choices=sorted(BACKENDS),
        default=None,
        help="Output format (default: markdown, or the config file's value)",
    )
    ap.add_argument(
        "--out",
        dest="out_dir",
        type=Path,
        default=None,
        help="Base output directory (default: ./Generated)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every written document",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except DocumarkError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
