"""Logic for computing compiler documentation IDs (the cref format).

IDs look like ``T:Sample.Widget``, ``M:Sample.Widget.Create(System.Int32)`` or
``M:Sample.Cache`1.Get``1(``0,`0)``. They key both the XML documentation file
and the ``cref`` attributes found inside it.
"""

from documark.human_name import ARITY_RE, SUFFIX_RE
from documark.member_info import (
    ConstructorInfo,
    EventInfo,
    FieldInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.parameter_info import ParameterInfo
from documark.type_info import TypeInfo
from documark.type_ref import TypeRef

MEMBER_PREFIXES = {
    FieldInfo: "F",
    PropertyInfo: "P",
    MethodInfo: "M",
    ConstructorInfo: "M",
    EventInfo: "E",
}


def type_id_name(type_info: TypeInfo) -> str:
    """Return the ID form of a declared type's name (nested '+' becomes '.')."""
    return type_info.full_name.replace("+", ".")


def _type_ref_id(
    type_ref: TypeRef,
    type_params: list[str],
    method_params: list[str],
) -> str:
    name = type_ref.name
    suffix = ""
    match = SUFFIX_RE.search(name)
    if match:
        suffix = match.group(0).replace("&", "@")
        name = name[: match.start()]

    if not type_ref.namespace:
        if name in method_params:
            return f"``{method_params.index(name)}{suffix}"
        if name in type_params:
            return f"`{type_params.index(name)}{suffix}"

    qualified = f"{type_ref.namespace}.{name}" if type_ref.namespace else name
    qualified = qualified.replace("+", ".")
    if type_ref.generic_arguments:
        args = ",".join(
            _type_ref_id(a, type_params, method_params)
            for a in type_ref.generic_arguments
        )
        qualified = ARITY_RE.sub("", qualified) + "{" + args + "}"
    return qualified + suffix


def parameter_id(
    param: ParameterInfo,
    type_params: list[str],
    method_params: list[str],
) -> str:
    """Return the ID form of one parameter type; by-ref parameters end in '@'."""
    text = _type_ref_id(param.parameter_type, type_params, method_params)
    if param.is_by_ref and not text.endswith("@"):
        text += "@"
    return text


def doc_id_of(entity: TypeInfo | MemberInfo) -> str:
    """Return the documentation ID of a type or member."""
    if isinstance(entity, TypeInfo):
        return f"T:{type_id_name(entity)}"

    owner = entity.declaring_type
    if owner is None:
        msg = f"Member {entity.name} has no declaring type"
        raise ValueError(msg)

    prefix = MEMBER_PREFIXES.get(type(entity), "M")
    name = entity.name.replace(".", "#")  # explicit interface implementations
    type_params = [a.name for a in owner.generic_arguments]
    method_params: list[str] = []

    if isinstance(entity, ConstructorInfo):
        name = "#cctor" if entity.is_static else "#ctor"
    elif isinstance(entity, MethodInfo) and entity.is_generic:
        method_params = [a.name for a in entity.generic_arguments]
        name = ARITY_RE.sub("", name) + f"``{len(method_params)}"

    text = f"{prefix}:{type_id_name(owner)}.{name}"
    if isinstance(entity, (MethodInfo, ConstructorInfo)) and entity.parameters:
        params = ",".join(
            parameter_id(p, type_params, method_params) for p in entity.parameters
        )
        text += f"({params})"
    return text
