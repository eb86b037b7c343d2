"""Logic for rendering the document of an overload group."""

from collections.abc import Sequence

from documark.human_name import human_name
from documark.member_info import (
    ConstructorInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.member_name import member_name
from documark.member_signature import member_signature, member_syntax
from documark.parameter_signature import parameter_signature
from documark.render_context import RenderContext
from documark.type_selection import TypeSelection


def render_member_document(
    selection: TypeSelection,
    members: Sequence[MemberInfo],
    ctx: RenderContext,
) -> str:
    """Render one document for members sharing a display name.

    The title comes from the first member; every overload follows in order
    with its own signature, badges and comments.
    """
    type_info = selection.type
    b = ctx.backend
    title = f"{human_name(type_info)}.{member_name(members[0])}"
    type_link = b.link(
        b.inline_code(human_name(type_info)),
        ctx.paths.file_name(type_info),
    )
    parts = [
        b.header(1, b.escape(title)),
        "",
        f"{b.bold('Containing Type:')} {type_link}",
        "",
    ]

    for index, member in enumerate(members):
        if index:
            parts += [b.divider(), ""]
        parts.extend(_render_member(member, ctx))

    return "\n".join(parts).rstrip() + "\n"


def _render_member(member: MemberInfo, ctx: RenderContext) -> list[str]:
    """Render a single overload."""
    b = ctx.backend
    parts = [b.header(2, b.escape(member_signature(member))), ""]

    badges = ctx.badges.render(member, is_static=member.is_static)
    if badges:
        parts.append(badges)

    summary = ctx.comments.summary_of(member)
    if summary:
        parts += [summary, ""]

    parts += [b.code(member_syntax(member), ctx.code_language), ""]

    parts.extend(_render_parameters(member, ctx))
    parts.extend(_render_returns(member, ctx))

    remarks = ctx.comments.remarks_of(member)
    if remarks:
        parts += [b.header(3, "Remarks"), "", remarks, ""]

    example = ctx.comments.example_of(member)
    if example:
        parts += [b.header(3, "Example"), "", example, ""]

    return parts


def _render_parameters(member: MemberInfo, ctx: RenderContext) -> list[str]:
    """Render the parameters table of a method or constructor."""
    if not isinstance(member, (MethodInfo, ConstructorInfo)) or not member.parameters:
        return []
    b = ctx.backend
    rows = [
        (b.inline_code(parameter_signature(p)), ctx.comments.param_of(member, p.name))
        for p in member.parameters
    ]
    return [b.header(3, "Parameters"), "", b.table("Name", "Summary", rows), ""]


def _render_returns(member: MemberInfo, ctx: RenderContext) -> list[str]:
    """Render the return value of a method or the value of a property."""
    b = ctx.backend
    if isinstance(member, MethodInfo):
        type_name = human_name(member.return_type)
        if type_name == "void":
            return []
        label, text = "Returns", ctx.comments.returns_of(member)
    elif isinstance(member, PropertyInfo):
        type_name = human_name(member.property_type)
        label, text = "Value", ctx.comments.value_of(member)
    else:
        return []

    line = b.inline_code(type_name)
    if text:
        line += f" {text}"
    return [b.header(3, label), "", line, ""]
