"""Tests for rendering XML documentation comments."""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import MagicMock

from documark.doc_comment_renderer import DocCommentRenderer, literal_text
from documark.documentation import Documentation
from documark.html_backend import HtmlBackend
from documark.load_assembly import load_assembly
from documark.load_doc_comments import load_doc_comments
from documark.markdown_backend import MarkdownBackend

DATA = Path(__file__).parent / "data"


def create_renderer() -> DocCommentRenderer:
    """Create a Markdown renderer over the sample assembly."""
    documentation = Documentation()
    documentation.add_assembly(
        load_assembly(DATA / "Sample.yml"),
        load_doc_comments(DATA / "Sample.xml"),
    )
    return DocCommentRenderer(documentation, MarkdownBackend())


def render(renderer: DocCommentRenderer, xml: str) -> str:
    """Render a comment given as XML source."""
    return renderer.render(ET.fromstring(xml))


def test_render_none_is_empty() -> None:
    """Verify a missing section renders as an empty string."""
    assert create_renderer().render(None) == ""


def test_render_text_normalizes_whitespace() -> None:
    """Verify runs of whitespace collapse and blank runs disappear."""
    renderer = create_renderer()
    text = render(renderer, "<summary>\n   Creates \n  widgets.\n  </summary>")
    assert text == "Creates widgets."


def test_render_see_resolves_type() -> None:
    """Verify a known type cref renders as its human name."""
    renderer = create_renderer()
    text = render(
        renderer,
        '<summary>See <see cref="T:Sample.Shape"/> for drawing.</summary>',
    )
    assert text == "See `Shape` for drawing."


def test_render_see_resolves_member() -> None:
    """Verify a known member cref renders as the member's name."""
    renderer = create_renderer()
    text = render(
        renderer,
        '<summary><see cref="M:Sample.Shape.Convert``2(``0)"/></summary>',
    )
    assert text == "`Convert<T|U>`"


def test_render_see_unknown_keeps_key() -> None:
    """Verify an unresolvable cref renders as its raw key."""
    renderer = create_renderer()
    text = render(renderer, '<summary><see cref="M:Sample.Unknown.Thing"/></summary>')
    assert text == "`M:Sample.Unknown.Thing`"


def test_render_paramref() -> None:
    """Verify paramref renders the parameter name as inline code."""
    renderer = create_renderer()
    text = render(
        renderer,
        '<summary>Creates <paramref name="count"/> widgets.</summary>',
    )
    assert text == "Creates `count` widgets."


def test_render_para_and_code() -> None:
    """Verify para ends with a line break and code becomes a code block."""
    renderer = create_renderer()
    assert render(renderer, "<remarks><para>First.</para></remarks>") == "First."
    text = render(renderer, "<example><code>var w = 1;</code></example>")
    assert text == "```cs\nvar w = 1;\n```"


def test_render_unknown_tag_literal() -> None:
    """Verify unknown tags come out as their XML source."""
    renderer = create_renderer()
    text = render(renderer, "<summary>Use <c>null</c> here.</summary>")
    assert text == "Use <c>null</c> here."
    assert literal_text(ET.fromstring("<c>x</c>")) == "<c>x</c>"


def test_render_children_once() -> None:
    """Verify nested text is rendered once, by its own element."""
    renderer = create_renderer()
    text = render(
        renderer,
        '<summary>A <see cref="T:Sample.Shape"/> and <paramref name="x"/>.</summary>',
    )
    assert text == "A `Shape` and `x` ."


def test_render_is_pure() -> None:
    """Verify rendering the same element twice gives the same text."""
    renderer = create_renderer()
    element = ET.fromstring(
        '<summary>Creates <paramref name="count"/> widgets.</summary>'
    )
    assert renderer.render(element) == renderer.render(element)
    assert ET.tostring(element, encoding="unicode").count("paramref") == 1


def test_register_custom_tag() -> None:
    """Verify a registered tag renderer replaces the literal fallback."""
    renderer = create_renderer()
    renderer.register("c", lambda r, e: r.backend.inline_code(e.text or ""))
    assert render(renderer, "<summary>Use <c>null</c>.</summary>") == (
        "Use `null` ."
    )


def test_sections_of_entities() -> None:
    """Verify summary, returns and param lookups by entity."""
    renderer = create_renderer()
    widget = renderer.documentation.try_get_type("Sample.Widget")
    assert widget is not None
    create = widget.methods[0]

    assert renderer.summary_of(widget) == "Creates widgets. See `Shape` for drawing."
    assert renderer.remarks_of(widget) == "Not thread safe."
    assert renderer.summary_of(create) == "Creates `count` widgets."
    assert renderer.returns_of(create) == "The new widget."
    assert renderer.param_of(create, "count") == "How many widgets to create."
    assert renderer.param_of(create, "missing") == ""
    assert renderer.example_of(create) == ""


def test_render_see_consults_oracle() -> None:
    """Verify crefs resolve through the oracle, types before members."""
    documentation = MagicMock()
    documentation.try_get_type.return_value = None
    documentation.try_get_member_info.return_value = None
    renderer = DocCommentRenderer(documentation, MarkdownBackend())

    text = render(renderer, '<summary><see cref="T:Other.Thing"/></summary>')

    assert text == "`T:Other.Thing`"
    documentation.try_get_type.assert_called_once_with("T:Other.Thing")
    documentation.try_get_member_info.assert_called_once_with("T:Other.Thing")


def test_render_keeps_entities_escaped() -> None:
    """Verify escaped characters in text stay escaped for every backend."""
    xml = "<summary>Returns a List&lt;T&gt; when a &amp;&amp; b.</summary>"
    expected = "Returns a List&lt;T&gt; when a &amp;&amp; b."
    documentation = Documentation()
    for backend in (MarkdownBackend(), HtmlBackend()):
        renderer = DocCommentRenderer(documentation, backend)
        assert render(renderer, xml) == expected


def test_render_see_langword() -> None:
    """Verify a keyword reference renders the keyword as inline code."""
    renderer = create_renderer()
    text = render(renderer, '<summary>Returns <see langword="null"/>.</summary>')
    assert text == "Returns `null` ."


def test_render_see_without_target_is_literal() -> None:
    """Verify a see tag with neither cref nor langword is kept as XML."""
    renderer = create_renderer()
    assert render(renderer, "<summary>See <see/>.</summary>") == "See <see /> ."
