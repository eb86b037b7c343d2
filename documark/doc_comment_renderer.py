"""Logic for rendering XML documentation comments into inline text."""

import copy
import html
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator

from documark.backend import Backend
from documark.documentation import Documentation
from documark.human_name import human_name
from documark.member_info import MemberInfo
from documark.member_name import member_name
from documark.normalize_spaces import normalize_spaces
from documark.type_info import TypeInfo

TagRenderer = Callable[["DocCommentRenderer", ET.Element], str]


def iter_nodes(element: ET.Element) -> Iterator[str | ET.Element]:
    """Yield the child nodes of an element: text runs and child elements in order."""
    if element.text:
        yield element.text
    for child in element:
        yield child
        if child.tail:
            yield child.tail


def literal_text(element: ET.Element) -> str:
    """Return the XML source of an element without its trailing text."""
    node = copy.copy(element)
    node.tail = None
    return ET.tostring(node, encoding="unicode")


def _render_children(renderer: "DocCommentRenderer", element: ET.Element) -> str:
    return renderer.render(element)


def _render_para(renderer: "DocCommentRenderer", element: ET.Element) -> str:
    return f"{renderer.render(element)}\n"


def _render_code(renderer: "DocCommentRenderer", element: ET.Element) -> str:
    return renderer.backend.code(renderer.render(element), renderer.code_language)


def _render_paramref(renderer: "DocCommentRenderer", element: ET.Element) -> str:
    return renderer.backend.inline_code(element.get("name", ""), renderer.code_language)


def _render_see(renderer: "DocCommentRenderer", element: ET.Element) -> str:
    key = element.get("cref")
    if key:
        name = renderer.cref_name(key)
    elif element.get("langword"):
        name = element.get("langword", "")
    else:
        return literal_text(element)
    return renderer.backend.inline_code(name, renderer.code_language)


DEFAULT_TAG_RENDERERS: dict[str, TagRenderer] = {
    "summary": _render_children,
    "remarks": _render_children,
    "para": _render_para,
    "code": _render_code,
    "paramref": _render_paramref,
    "see": _render_see,
}


class DocCommentRenderer:
    """Renders a documentation comment tree as prose for one backend.

    Rendering is a pure function of the tree and of what the documentation
    oracle can resolve; unknown tags come out as their literal XML and
    unresolvable crefs as their raw key.
    """

    def __init__(
        self,
        documentation: Documentation,
        backend: Backend,
        code_language: str = "cs",
    ) -> None:
        """Initialize with the cref resolver and the output backend."""
        self.documentation = documentation
        self.backend = backend
        self.code_language = code_language
        self.tag_renderers = dict(DEFAULT_TAG_RENDERERS)

    def register(self, tag: str, fn: TagRenderer) -> None:
        """Add or replace the renderer for a tag."""
        self.tag_renderers[tag] = fn

    def cref_name(self, key: str) -> str:
        """Name a cref target: its type name, else its member name, else the key."""
        type_info = self.documentation.try_get_type(key)
        if type_info is not None:
            return human_name(type_info)

        member = self.documentation.try_get_member_info(key)
        if member is not None:
            return member_name(member)

        # Unknown target, keep the key
        return key

    def render(self, element: ET.Element | None) -> str:
        """Render the children of an element, one space between fragments."""
        if element is None:
            return ""

        output = ""
        for node in iter_nodes(element):
            if isinstance(node, str):
                text = normalize_spaces(node).strip()
                if not text:
                    continue
                # Keep entities escaped, as they read in the XML source
                output += html.escape(text, quote=False)
            else:
                fn = self.tag_renderers.get(node.tag)
                output += fn(self, node) if fn else literal_text(node)
            output += " "
        return output.strip()

    def section(self, entity: TypeInfo | MemberInfo, tag: str) -> str:
        """Render one top-level section (summary, remarks, ...) of an entity."""
        documentation = self.documentation.get_documentation(entity)
        if documentation is None:
            return ""
        return self.render(documentation.find(tag))

    def summary_of(self, entity: TypeInfo | MemberInfo) -> str:
        return self.section(entity, "summary")

    def remarks_of(self, entity: TypeInfo | MemberInfo) -> str:
        return self.section(entity, "remarks")

    def example_of(self, entity: TypeInfo | MemberInfo) -> str:
        return self.section(entity, "example")

    def returns_of(self, entity: MemberInfo) -> str:
        return self.section(entity, "returns")

    def value_of(self, entity: MemberInfo) -> str:
        return self.section(entity, "value")

    def param_of(self, entity: TypeInfo | MemberInfo, name: str) -> str:
        """Render the <param> comment for one parameter."""
        documentation = self.documentation.get_documentation(entity)
        if documentation is None:
            return ""
        for param in documentation.iter("param"):
            if param.get("name") == name:
                return self.render(param)
        return ""
