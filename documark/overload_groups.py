"""Logic for grouping members that share a display name."""

from documark.member_info import MemberInfo
from documark.member_name import member_name
from documark.type_selection import TypeSelection


def overload_groups(selection: TypeSelection) -> dict[str, list[MemberInfo]]:
    """Group the selected members by display name, in first-appearance order."""
    groups: dict[str, list[MemberInfo]] = {}
    for member in selection.members:
        groups.setdefault(member_name(member), []).append(member)
    return groups
