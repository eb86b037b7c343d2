"""Logic for rendering the declaration line of a type."""

from documark.human_name import human_name
from documark.normalize_spaces import normalize_spaces
from documark.type_info import TypeInfo


def type_modifiers(type_info: TypeInfo) -> str:
    """Return the abstract/sealed/static keyword of a class, if any."""
    if type_info.kind != "class":
        # Structs, enums and delegates are implicitly sealed, interfaces abstract.
        return ""
    if type_info.is_static or (type_info.is_abstract and type_info.is_sealed):
        return "static"
    if type_info.is_abstract:
        return "abstract"
    if type_info.is_sealed:
        return "sealed"
    return ""


def type_inherits(type_info: TypeInfo) -> list[str]:
    """Return the human names of the base type and implemented interfaces."""
    inherits = []
    base = type_info.base_type
    if base is not None and not (type_info.is_value_type or type_info.is_delegate):
        if human_name(base) != "object":
            inherits.append(human_name(base))

    # Append interfaces
    inherits.extend(human_name(i) for i in type_info.interfaces)
    return inherits


def type_syntax(type_info: TypeInfo) -> str:
    """Render e.g. 'public sealed class Cache<T> : Base, IDisposable'."""
    access = f"{type_info.access} {type_modifiers(type_info)} {type_info.kind}"
    text = f"{normalize_spaces(access).strip()} {human_name(type_info)}"

    inherits = type_inherits(type_info)
    if inherits:
        text += f" : {', '.join(inherits)}"
    return normalize_spaces(text).strip()
