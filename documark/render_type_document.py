"""Logic for rendering type documents."""

from collections.abc import Sequence

from documark.assembly_details import dependencies_string, framework_string
from documark.errors import MissingMetadataError
from documark.human_name import human_name
from documark.member_info import MemberInfo
from documark.member_signature import member_signature, member_syntax
from documark.parameter_signature import parameter_signature
from documark.render_context import RenderContext
from documark.type_selection import TypeSelection
from documark.type_syntax import type_syntax


def render_type_document(selection: TypeSelection, ctx: RenderContext) -> str:
    """Render the document for the selected type."""
    type_info = selection.type
    b = ctx.backend
    title = f"{human_name(type_info)} {type_info.kind.capitalize()}"
    parts = [b.header(1, b.escape(title)), ""]

    badges = ctx.badges.render(type_info)
    if badges:
        parts.append(badges)

    parts.extend(_render_type_metadata(selection, ctx))

    summary = ctx.comments.summary_of(type_info)
    if summary:
        parts += [summary, ""]

    parts += [b.code(type_syntax(type_info), ctx.code_language), ""]

    remarks = ctx.comments.remarks_of(type_info)
    if remarks:
        parts += [b.header(2, "Remarks"), "", remarks, ""]

    example = ctx.comments.example_of(type_info)
    if example:
        parts += [b.header(2, "Example"), "", example, ""]

    if type_info.is_enum:
        parts.extend(_render_enum_values(selection, ctx))
    elif type_info.is_delegate:
        parts.extend(_render_delegate_invoke(selection, ctx))
    else:
        parts.extend(_render_constructors(selection, ctx))
        parts.extend(_render_member_tables(selection, ctx))

    return "\n".join(parts).rstrip() + "\n"


def _render_type_metadata(selection: TypeSelection, ctx: RenderContext) -> list[str]:
    """Render namespace, assembly, framework and dependencies."""
    type_info = selection.type
    assembly = type_info.assembly
    if assembly is None:
        msg = f"Type {type_info.full_name} does not belong to an assembly"
        raise MissingMetadataError(msg)

    b = ctx.backend
    parts = []
    if type_info.namespace:
        parts.append(f"{b.bold('Namespace:')} {b.escape(type_info.namespace)}  ")
    parts += [
        f"{b.bold('Assembly:')} {b.escape(assembly.name)}  ",
        f"{b.bold('Framework:')} {b.escape(framework_string(assembly))}  ",
        f"{b.bold('Dependencies:')} {dependencies_string(assembly, ctx)}",
        "",
    ]
    return parts


def _render_enum_values(selection: TypeSelection, ctx: RenderContext) -> list[str]:
    """Render the values of an enumeration."""
    b = ctx.backend
    rows = []
    for value in selection.static_fields:
        name = value.name
        if value.constant_value is not None:
            name = f"{name} = {value.constant_value}"
        rows.append((b.inline_code(name), ctx.comments.summary_of(value)))
    if not rows:
        return []
    return [b.header(2, "Values"), "", b.table("Name", "Summary", rows), ""]


def _render_delegate_invoke(
    selection: TypeSelection,
    ctx: RenderContext,
) -> list[str]:
    """Render the signature a delegate is invoked with."""
    invoke = next((m for m in selection.methods if m.name == "Invoke"), None)
    if invoke is None:
        return []

    b = ctx.backend
    parts = [
        b.header(2, "Signature"),
        "",
        b.code(member_syntax(invoke), ctx.code_language),
        "",
    ]
    rows = [
        (
            b.inline_code(parameter_signature(p)),
            ctx.comments.param_of(selection.type, p.name),
        )
        for p in invoke.parameters
    ]
    if rows:
        parts += [b.table("Parameter", "Summary", rows), ""]
    return parts


def _render_constructors(selection: TypeSelection, ctx: RenderContext) -> list[str]:
    """Render each constructor in full; constructors have no documents of their own."""
    if not selection.constructors:
        return []

    b = ctx.backend
    parts = [b.header(2, "Constructors"), ""]
    for constructor in selection.constructors:
        parts += [b.header(3, b.escape(member_signature(constructor))), ""]
        badges = ctx.badges.render(constructor)
        if badges:
            parts.append(badges)
        summary = ctx.comments.summary_of(constructor)
        if summary:
            parts += [summary, ""]
        parts += [b.code(member_syntax(constructor), ctx.code_language), ""]
    return parts


def _render_member_tables(selection: TypeSelection, ctx: RenderContext) -> list[str]:
    """Render one linked table per member kind and scope."""
    sections: list[tuple[str, Sequence[MemberInfo]]] = [
        ("Fields", selection.instance_fields),
        ("Properties", selection.instance_properties),
        ("Methods", selection.instance_methods),
        ("Events", selection.instance_events),
        ("Static Fields", selection.static_fields),
        ("Static Properties", selection.static_properties),
        ("Static Methods", selection.static_methods),
        ("Static Events", selection.static_events),
    ]

    b = ctx.backend
    parts = []
    for title, members in sections:
        if not members:
            continue
        rows = [
            (
                b.link(
                    b.inline_code(member_signature(m, compact=True)),
                    ctx.paths.file_name(m),
                ),
                ctx.comments.summary_of(m),
            )
            for m in members
        ]
        parts += [b.header(2, title), "", b.table("Name", "Summary", rows), ""]
    return parts
