"""Logic for making names safe to use as file path segments."""

import re

from documark.errors import InvalidPathError

# Characters no common filesystem accepts in a file name
ILLEGAL_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


class Sanitizer:
    """Neutralizes characters and names that are illegal in file names."""

    def __init__(self, replacement: str = "_") -> None:
        """Initialize the sanitizer with the character that replaces illegal ones."""
        self.replacement = replacement
        self.reserved = {
            "CON",
            "PRN",
            "AUX",
            "NUL",
            "COM1",
            "COM2",
            "COM3",
            "COM4",
            "COM5",
            "COM6",
            "COM7",
            "COM8",
            "COM9",
            "LPT1",
            "LPT2",
            "LPT3",
            "LPT4",
            "LPT5",
            "LPT6",
            "LPT7",
            "LPT8",
            "LPT9",
        }

    def normalize(self, segment: str) -> str:
        """Return a legal file name for a segment, or raise InvalidPathError."""
        # 1. Sanitize chars
        clean = ILLEGAL_CHARS_RE.sub(self.replacement, segment)

        # 2. Windows Cleanup
        clean = clean.rstrip(". ")
        if not clean.strip(self.replacement + ". "):
            msg = f"Cannot build a file name from {segment!r}"
            raise InvalidPathError(msg)

        # 3. Reserved check
        if clean.split(".")[0].upper() in self.reserved:
            clean = self.replacement + clean

        return clean
