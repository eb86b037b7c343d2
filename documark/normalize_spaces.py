"""Utility for collapsing runs of whitespace."""

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_spaces(text: str) -> str:
    """Collapse every whitespace run into a single space."""
    return WHITESPACE_RE.sub(" ", text)
