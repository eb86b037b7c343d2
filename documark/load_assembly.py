"""Logic for loading assembly metadata descriptions from YAML."""

import logging
from pathlib import Path
from typing import Any

import yaml

from documark.assembly_info import AssemblyInfo, FrameworkInfo
from documark.errors import MetadataFormatError
from documark.is_visible import ACCESS_LEVELS, PUBLIC
from documark.member_info import (
    AccessorInfo,
    ConstructorInfo,
    EventInfo,
    FieldInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.parameter_info import ParameterInfo
from documark.type_info import TYPE_KINDS, TypeInfo
from documark.type_ref import TypeRef

logger = logging.getLogger(__name__)

DIRECTIONS = {"ref", "out", "in"}


def parse_type_ref(value: Any) -> TypeRef:
    """Parse 'System.Int32', 'T' or {name, namespace, arguments} into a TypeRef."""
    if isinstance(value, TypeRef):
        return value
    if isinstance(value, dict):
        name = value.get("name")
        if not name:
            msg = f"Type reference without a name: {value!r}"
            raise MetadataFormatError(msg)
        args = tuple(parse_type_ref(a) for a in value.get("arguments") or [])
        return TypeRef(str(name), value.get("namespace"), args)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        namespace, _, name = text.rpartition(".")
        return TypeRef(name, namespace or None)
    msg = f"Invalid type reference: {value!r}"
    raise MetadataFormatError(msg)


def _access(raw: dict[str, Any], default: str = PUBLIC) -> str:
    access = str(raw.get("access") or default).strip().lower()
    if access not in ACCESS_LEVELS:
        msg = f"Unknown access level {access!r} on {raw.get('name', '?')}"
        raise MetadataFormatError(msg)
    return access


def _refs(values: Any) -> list[TypeRef]:
    return [parse_type_ref(v) for v in values or []]


def _parameter(raw: dict[str, Any]) -> ParameterInfo:
    direction = raw.get("direction")
    if direction is not None and direction not in DIRECTIONS:
        msg = f"Unknown parameter direction {direction!r}"
        raise MetadataFormatError(msg)
    return ParameterInfo(
        name=str(raw.get("name") or ""),
        parameter_type=parse_type_ref(raw.get("type")),
        direction=direction,
        is_params=bool(raw.get("params", False)),
        is_optional=bool(raw.get("optional", "default" in raw)),
        default_value=raw.get("default"),
    )


def _parameters(values: Any) -> list[ParameterInfo]:
    return [_parameter(p) for p in values or []]


def _accessor(value: Any) -> AccessorInfo | None:
    if value is None or value is False:
        return None
    if value is True:
        return AccessorInfo()
    return AccessorInfo(access=_access({"access": value}))


def _common(raw: dict[str, Any]) -> dict[str, Any]:
    name = raw.get("name")
    if not name:
        msg = f"Member without a name: {raw!r}"
        raise MetadataFormatError(msg)
    return {
        "name": str(name),
        "access": _access(raw),
        "is_static": bool(raw.get("static", False)),
        "is_special_name": bool(raw.get("special_name", False)),
        "attributes": _refs(raw.get("attributes")),
    }


def _constructor(raw: dict[str, Any]) -> ConstructorInfo:
    return ConstructorInfo(
        access=_access(raw),
        is_static=bool(raw.get("static", False)),
        attributes=_refs(raw.get("attributes")),
        parameters=_parameters(raw.get("parameters")),
    )


def _field(raw: dict[str, Any]) -> FieldInfo:
    return FieldInfo(
        **_common(raw),
        field_type=parse_type_ref(raw.get("type")),
        is_init_only=bool(raw.get("readonly", False)),
        is_literal=bool(raw.get("const", False)),
        constant_value=raw.get("value"),
    )


def _property(raw: dict[str, Any]) -> PropertyInfo:
    return PropertyInfo(
        **_common(raw),
        property_type=parse_type_ref(raw.get("type")),
        getter=_accessor(raw.get("getter", PUBLIC)),
        setter=_accessor(raw.get("setter")),
    )


def _method(raw: dict[str, Any]) -> MethodInfo:
    returns = raw.get("returns")
    return MethodInfo(
        **_common(raw),
        return_type=parse_type_ref(returns) if returns else TypeRef("Void", "System"),
        parameters=_parameters(raw.get("parameters")),
        generic_arguments=tuple(_refs(raw.get("generic_arguments"))),
        is_abstract=bool(raw.get("abstract", False)),
        is_virtual=bool(raw.get("virtual", False)),
    )


def _event(raw: dict[str, Any]) -> EventInfo:
    return EventInfo(**_common(raw), event_type=parse_type_ref(raw.get("type")))


def _type(raw: dict[str, Any], assembly: AssemblyInfo) -> TypeInfo:
    name = raw.get("name")
    if not name:
        msg = f"Type without a name in assembly {assembly.name}"
        raise MetadataFormatError(msg)
    kind = str(raw.get("kind") or "class").lower()
    if kind not in TYPE_KINDS:
        msg = f"Unknown kind {kind!r} for type {name}"
        raise MetadataFormatError(msg)

    modifiers = {str(m).lower() for m in raw.get("modifiers") or []}
    base = raw.get("base")
    type_info = TypeInfo(
        name=str(name),
        namespace=raw.get("namespace") or None,
        kind=kind,
        access=_access(raw),
        generic_arguments=tuple(_refs(raw.get("generic_arguments"))),
        is_abstract="abstract" in modifiers,
        is_sealed="sealed" in modifiers,
        is_static="static" in modifiers,
        base_type=parse_type_ref(base) if base else None,
        interfaces=_refs(raw.get("interfaces")),
        attributes=_refs(raw.get("attributes")),
        constructors=[_constructor(c) for c in raw.get("constructors") or []],
        fields=[_field(f) for f in raw.get("fields") or []],
        properties=[_property(p) for p in raw.get("properties") or []],
        methods=[_method(m) for m in raw.get("methods") or []],
        events=[_event(e) for e in raw.get("events") or []],
        assembly=assembly,
    )
    for member in type_info.declared_members():
        member.declaring_type = type_info
    return type_info


def _framework(value: Any) -> FrameworkInfo | None:
    if not value:
        return None
    if isinstance(value, dict):
        return FrameworkInfo(
            name=str(value.get("name") or ""),
            display_name=str(value.get("display_name") or ""),
        )
    return FrameworkInfo(name=str(value))


def parse_assembly(doc: Any) -> AssemblyInfo:
    """Build an AssemblyInfo from an already-parsed YAML document."""
    if not isinstance(doc, dict) or not doc.get("name"):
        msg = "Assembly metadata must be a mapping with a 'name'"
        raise MetadataFormatError(msg)

    assembly = AssemblyInfo(
        name=str(doc["name"]),
        framework=_framework(doc.get("framework")),
        references=[str(r) for r in doc.get("references") or []],
        attributes=_refs(doc.get("attributes")),
    )
    assembly.types = [_type(t, assembly) for t in doc.get("types") or []]
    logger.debug("Loaded %d types from %s", len(assembly.types), assembly.name)
    return assembly


def load_assembly(path: Path) -> AssemblyInfo:
    """Load and parse an assembly metadata YAML file."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise MetadataFormatError(msg) from e
    return parse_assembly(doc)
