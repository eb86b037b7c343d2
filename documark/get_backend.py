"""Lookup of backends by format name."""

from documark.backend import Backend
from documark.html_backend import HtmlBackend
from documark.markdown_backend import MarkdownBackend

BACKENDS: dict[str, type[Backend]] = {
    "markdown": MarkdownBackend,
    "md": MarkdownBackend,
    "html": HtmlBackend,
}


def get_backend(name: str) -> Backend:
    """Instantiate the backend registered under a format name."""
    try:
        return BACKENDS[name.lower()]()
    except KeyError:
        expected = ", ".join(sorted(BACKENDS))
        msg = f"Unknown format {name!r} (expected one of: {expected})"
        raise ValueError(msg) from None
