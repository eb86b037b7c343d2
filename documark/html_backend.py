"""HTML rendering primitives."""

import html
from collections.abc import Iterable

from documark.backend import Backend


class HtmlBackend(Backend):
    """Renders documents as HTML fragments."""

    extension = "html"

    def preformatted(self, text: str) -> str:
        return f"<pre>{html.escape(text)}</pre>"

    def block(self, text: str) -> str:
        return f"<blockquote>{text}</blockquote>"

    def italics(self, text: str, style: str = "cs") -> str:
        return f"<em>{text}</em>"

    def bold(self, text: str, style: str = "cs") -> str:
        return f"<strong>{text}</strong>"

    def inline_code(self, text: str, style: str = "cs") -> str:
        return f'<code class="language-{style}">{html.escape(text)}</code>'

    def table(
        self,
        header_left: str,
        header_right: str,
        rows: Iterable[tuple[str, str]],
    ) -> str:
        body = [f"<tr><td>{left}</td><td>{right}</td></tr>" for left, right in rows]
        if not body:
            return ""
        head = f"<tr><th>{header_left}</th><th>{header_right}</th></tr>"
        return "\n".join(["<table>", head, *body, "</table>"])

    def header(self, level: int, text: str) -> str:
        level = max(1, min(level, 6))
        return f"<h{level}>{text}</h{level}>"

    def code(self, text: str, style: str = "cs") -> str:
        return f'<pre><code class="language-{style}">{html.escape(text)}</code></pre>'

    def link(self, text: str, target: str) -> str:
        return f'<a href="{html.escape(target, quote=True)}">{text}</a>'

    def badge(self, text: str) -> str:
        return f'<span class="badge">{html.escape(text)}</span>'

    def divider(self) -> str:
        return "<hr/>"

    def escape(self, text: str) -> str:
        return html.escape(text)
