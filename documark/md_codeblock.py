"""Utility for generating Markdown code blocks."""

import re

FENCE_RE = re.compile(r"^`{3,}", re.MULTILINE)


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block.

    The fence grows past the longest backtick run that starts a line of the
    code, so embedded fences cannot close the block early.
    """
    longest = max((len(m) for m in FENCE_RE.findall(code)), default=2)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
