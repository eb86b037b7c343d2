"""Logic for rendering property declarations."""

from documark.human_name import human_name
from documark.member_info import PropertyInfo


def property_syntax(prop: PropertyInfo) -> str:
    """Render 'int Size { get; protected set; }' showing only visible accessors."""
    e = ""

    if prop.getter is not None and prop.getter.is_visible:
        if prop.getter.access == "protected":
            e += "protected "
        e += "get; "

    if prop.setter is not None and prop.setter.is_visible:
        if prop.setter.access == "protected":
            e += "protected "
        e += "set;"

    ret = human_name(prop.property_type)
    return f"{ret} {prop.name} {{ {e.strip()} }}"
