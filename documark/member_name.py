"""Logic for the display names of members."""

from documark.human_name import ARITY_RE, human_name
from documark.member_info import ConstructorInfo, MemberInfo, MethodInfo


def member_name(member: MemberInfo) -> str:
    """Return the name a member is displayed and grouped under.

    Generic methods render as Name<T|U>; constructors take the name of their
    declaring type without its arity marker.
    """
    if isinstance(member, MethodInfo) and member.is_generic:
        name = ARITY_RE.sub("", member.name)
        args = "|".join(human_name(t) for t in member.generic_arguments)
        return f"{name}<{args}>"

    if isinstance(member, ConstructorInfo) and member.declaring_type is not None:
        return ARITY_RE.sub("", member.declaring_type.name)

    return member.name
