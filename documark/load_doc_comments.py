"""Logic for loading compiler-emitted XML documentation files."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from documark.errors import MetadataFormatError

logger = logging.getLogger(__name__)


def parse_doc_comments(text: str | bytes) -> dict[str, ET.Element]:
    """Map each documentation ID to its <member> element."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        msg = f"Invalid XML documentation: {e}"
        raise MetadataFormatError(msg) from e

    comments: dict[str, ET.Element] = {}
    for member in root.iter("member"):
        key = member.get("name")
        if key:
            comments[key] = member
    return comments


def load_doc_comments(path: Path) -> dict[str, ET.Element]:
    """Load an XML documentation file, or nothing when it does not exist."""
    if not path.exists():
        logger.warning("Documentation file not found: %s", path)
        return {}
    comments = parse_doc_comments(path.read_bytes())
    logger.debug("Loaded %d doc comments from %s", len(comments), path)
    return comments
