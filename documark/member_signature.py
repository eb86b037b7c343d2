"""Logic for rendering member signatures and declaration lines."""

from documark.human_name import human_name
from documark.member_info import (
    ConstructorInfo,
    EventInfo,
    FieldInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.member_name import member_name
from documark.normalize_spaces import normalize_spaces
from documark.parameter_signature import parameter_signature
from documark.property_syntax import property_syntax


def member_signature(member: MemberInfo, *, compact: bool = False) -> str:
    """Render Name(int a, string b), or Name(int, string) when compact.

    Members without parameters render as their display name.
    """
    if not isinstance(member, (MethodInfo, ConstructorInfo)):
        return member_name(member)
    params = ", ".join(
        parameter_signature(p, compact=compact) for p in member.parameters
    )
    return f"{member_name(member)}({params.strip()})"


def member_syntax(member: MemberInfo) -> str:
    """Render the full declaration line of a member."""
    pre = [member.access]
    if member.is_static and not isinstance(member, ConstructorInfo):
        pre.append("static")

    if isinstance(member, MethodInfo):
        if member.is_abstract:
            pre.append("abstract")
        elif member.is_virtual:
            pre.append("virtual")
        body = f"{human_name(member.return_type)} {member_signature(member)}"
    elif isinstance(member, ConstructorInfo):
        body = member_signature(member)
    elif isinstance(member, PropertyInfo):
        body = property_syntax(member)
    elif isinstance(member, FieldInfo):
        if member.is_literal:
            # Constants are implicitly static
            pre = [p for p in pre if p != "static"]
            pre.append("const")
        elif member.is_init_only:
            pre.append("readonly")
        body = f"{human_name(member.field_type)} {member.name}"
    elif isinstance(member, EventInfo):
        body = f"event {human_name(member.event_type)} {member.name}"
    else:
        body = member.name

    return normalize_spaces(" ".join([*pre, body])).strip()
