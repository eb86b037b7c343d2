"""Data model for the types declared by an assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from documark.is_visible import PUBLIC
from documark.member_info import (
    ConstructorInfo,
    EventInfo,
    FieldInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.type_ref import TypeRef

if TYPE_CHECKING:
    from documark.assembly_info import AssemblyInfo

TYPE_KINDS = ("class", "struct", "interface", "enum", "delegate")


@dataclass(eq=False)
class TypeInfo:
    """A type declared by an assembly, with its declared members."""

    name: str
    namespace: str | None = None
    kind: str = "class"
    access: str = PUBLIC
    generic_arguments: tuple[TypeRef, ...] = ()
    is_abstract: bool = False
    is_sealed: bool = False
    is_static: bool = False
    base_type: TypeRef | None = None
    interfaces: list[TypeRef] = field(default_factory=list)
    attributes: list[TypeRef] = field(default_factory=list)
    constructors: list[ConstructorInfo] = field(default_factory=list)
    fields: list[FieldInfo] = field(default_factory=list)
    properties: list[PropertyInfo] = field(default_factory=list)
    methods: list[MethodInfo] = field(default_factory=list)
    events: list[EventInfo] = field(default_factory=list)
    assembly: AssemblyInfo | None = field(default=None, repr=False)

    @property
    def full_name(self) -> str:
        """Return the namespace-qualified metadata name."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def is_enum(self) -> bool:
        return self.kind == "enum"

    @property
    def is_delegate(self) -> bool:
        return self.kind == "delegate"

    @property
    def is_value_type(self) -> bool:
        return self.kind in ("struct", "enum")

    def declared_members(self) -> list[MemberInfo]:
        """Return every declared member, constructors first."""
        return [
            *self.constructors,
            *self.fields,
            *self.properties,
            *self.methods,
            *self.events,
        ]
