"""Logic for rendering type references as human-readable names."""

import re
from typing import Protocol

# Generic arity marker: List`1 -> List
ARITY_RE = re.compile(r"`\d+")
# Array, pointer and by-ref decorations that trail the element type name
SUFFIX_RE = re.compile(r"(?:\[[,\s]*\]|\*|&)+$")

TYPE_ALIASES = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}


class NamedType(Protocol):
    """Anything shaped like a type reference (TypeRef or TypeInfo)."""

    name: str
    namespace: str | None
    generic_arguments: tuple


def human_name(type_ref: NamedType) -> str:
    """Render a type as it reads in source, e.g. Dictionary<string|int>.

    Arity markers are stripped, well-known System types use their keyword,
    nested types use '.', and generic arguments are rendered recursively and
    joined with '|'.
    """
    name = type_ref.name
    suffix = ""
    match = SUFFIX_RE.search(name)
    if match:
        suffix = match.group(0)
        name = name[: match.start()]

    name = ARITY_RE.sub("", name)
    qualified = f"{type_ref.namespace}.{name}" if type_ref.namespace else name
    name = TYPE_ALIASES.get(qualified, name).replace("+", ".")

    if type_ref.generic_arguments:
        args = "|".join(human_name(a) for a in type_ref.generic_arguments)
        name = f"{name}<{args}>"
    return name + suffix
