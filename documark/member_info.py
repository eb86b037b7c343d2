"""Data models for the members declared by a type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from documark.is_visible import PROTECTED, PUBLIC, is_visible
from documark.parameter_info import ParameterInfo
from documark.type_ref import TypeRef

if TYPE_CHECKING:
    from documark.type_info import TypeInfo


@dataclass(frozen=True)
class AccessorInfo:
    """A property getter or setter."""

    access: str = PUBLIC

    @property
    def is_visible(self) -> bool:
        """Check if the accessor is public or protected."""
        return is_visible(self.access)


@dataclass(eq=False, kw_only=True)
class MemberInfo:
    """Common shape of every member kind."""

    name: str
    access: str = PUBLIC
    is_static: bool = False
    is_special_name: bool = False
    attributes: list[TypeRef] = field(default_factory=list)
    declaring_type: TypeInfo | None = field(default=None, repr=False)

    @property
    def is_public(self) -> bool:
        """Check if the member is public."""
        return self.access == PUBLIC

    @property
    def is_family(self) -> bool:
        """Check if the member is protected (and only protected)."""
        return self.access == PROTECTED


@dataclass(eq=False, kw_only=True)
class ConstructorInfo(MemberInfo):
    """An instance or static constructor."""

    name: str = ".ctor"
    parameters: list[ParameterInfo] = field(default_factory=list)


@dataclass(eq=False, kw_only=True)
class FieldInfo(MemberInfo):
    """A field, including enum values."""

    field_type: TypeRef
    is_init_only: bool = False
    is_literal: bool = False
    constant_value: object = None


@dataclass(eq=False, kw_only=True)
class PropertyInfo(MemberInfo):
    """A property with an optional getter and setter."""

    property_type: TypeRef
    getter: AccessorInfo | None = None
    setter: AccessorInfo | None = None


@dataclass(eq=False, kw_only=True)
class MethodInfo(MemberInfo):
    """A method, possibly generic."""

    return_type: TypeRef = field(default_factory=lambda: TypeRef("Void", "System"))
    parameters: list[ParameterInfo] = field(default_factory=list)
    generic_arguments: tuple[TypeRef, ...] = ()
    is_abstract: bool = False
    is_virtual: bool = False

    @property
    def is_generic(self) -> bool:
        """Check if the method declares generic arguments."""
        return bool(self.generic_arguments)


@dataclass(eq=False, kw_only=True)
class EventInfo(MemberInfo):
    """An event."""

    event_type: TypeRef
