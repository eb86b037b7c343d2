"""Markdown rendering primitives."""

import re
from collections.abc import Iterable

from documark.backend import Backend
from documark.md_codeblock import md_codeblock
from documark.md_table import md_table

MD_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>#|])")


class MarkdownBackend(Backend):
    """Renders documents as GitHub-flavored Markdown."""

    extension = "md"

    def preformatted(self, text: str) -> str:
        return md_codeblock("", text)

    def block(self, text: str) -> str:
        return "\n".join(f"> {line}".rstrip() for line in text.splitlines())

    def italics(self, text: str, style: str = "cs") -> str:
        return f"*{text}*"

    def bold(self, text: str, style: str = "cs") -> str:
        return f"**{text}**"

    def inline_code(self, text: str, style: str = "cs") -> str:
        # A backtick inside the span needs a longer fence
        if "`" in text:
            return f"`` {text} ``"
        return f"`{text}`"

    def table(
        self,
        header_left: str,
        header_right: str,
        rows: Iterable[tuple[str, str]],
    ) -> str:
        return md_table(
            [header_left, header_right],
            [[left, right] for left, right in rows],
        )

    def header(self, level: int, text: str) -> str:
        return f"{'#' * max(1, min(level, 6))} {text}"

    def code(self, text: str, style: str = "cs") -> str:
        return md_codeblock(style, text)

    def link(self, text: str, target: str) -> str:
        return f"[{text}]({target.replace(' ', '%20')})"

    def badge(self, text: str) -> str:
        return f"<kbd>{text}</kbd>"

    def divider(self) -> str:
        return "---"

    def escape(self, text: str) -> str:
        return MD_SPECIAL_RE.sub(r"\\\1", text)
