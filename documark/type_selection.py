"""Logic for deriving the documented member sets of a type."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from documark.member_info import (
    ConstructorInfo,
    EventInfo,
    FieldInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.type_info import TypeInfo

DEFAULT_IGNORED_METHOD_NAMES = ("Equals", "ToString", "GetHashCode", "Finalize")


@dataclass(frozen=True)
class TypeSelection:
    """A type together with the members that will be documented for it.

    Instance and static collections partition the filtered members; the
    per-kind and per-scope unions are concatenations in instance-then-static
    order.
    """

    type: TypeInfo
    constructors: tuple[ConstructorInfo, ...]

    instance_fields: tuple[FieldInfo, ...]
    instance_properties: tuple[PropertyInfo, ...]
    instance_methods: tuple[MethodInfo, ...]
    instance_events: tuple[EventInfo, ...]

    static_fields: tuple[FieldInfo, ...]
    static_properties: tuple[PropertyInfo, ...]
    static_methods: tuple[MethodInfo, ...]
    static_events: tuple[EventInfo, ...]

    @property
    def fields(self) -> tuple[FieldInfo, ...]:
        return self.instance_fields + self.static_fields

    @property
    def properties(self) -> tuple[PropertyInfo, ...]:
        return self.instance_properties + self.static_properties

    @property
    def methods(self) -> tuple[MethodInfo, ...]:
        return self.instance_methods + self.static_methods

    @property
    def events(self) -> tuple[EventInfo, ...]:
        return self.instance_events + self.static_events

    @property
    def instance_members(self) -> tuple[MemberInfo, ...]:
        return (
            *self.instance_fields,
            *self.instance_properties,
            *self.instance_methods,
            *self.instance_events,
        )

    @property
    def static_members(self) -> tuple[MemberInfo, ...]:
        return (
            *self.static_fields,
            *self.static_properties,
            *self.static_methods,
            *self.static_events,
        )

    @property
    def members(self) -> tuple[MemberInfo, ...]:
        """Every documented member: fields, properties, methods, then events."""
        return (*self.fields, *self.properties, *self.methods, *self.events)


def _is_visible_property(prop: PropertyInfo) -> bool:
    """A property is documented only through a public or protected getter."""
    if prop.getter is not None:
        return prop.getter.is_visible
    return False


class MetadataIntrospector:
    """Filters the declared members of a type into a TypeSelection."""

    def __init__(self, ignored_method_names: Iterable[str] | None = None) -> None:
        """Initialize with the method names treated as inherited noise."""
        if ignored_method_names is None:
            ignored_method_names = DEFAULT_IGNORED_METHOD_NAMES
        self.ignored_method_names = frozenset(ignored_method_names)

    def select(self, type_info: TypeInfo) -> TypeSelection:
        """Compute a fresh selection for a type."""
        fields = self._visible(type_info.fields)
        properties = [
            p
            for p in type_info.properties
            if not p.is_special_name and _is_visible_property(p)
        ]
        methods = [
            m
            for m in self._visible(type_info.methods)
            if m.name not in self.ignored_method_names
        ]
        events = self._visible(type_info.events)

        return TypeSelection(
            type=type_info,
            constructors=tuple(c for c in type_info.constructors if not c.is_static),
            instance_fields=_scope(fields, is_static=False),
            instance_properties=_scope(properties, is_static=False),
            instance_methods=_scope(methods, is_static=False),
            instance_events=_scope(events, is_static=False),
            static_fields=_scope(fields, is_static=True),
            static_properties=_scope(properties, is_static=True),
            static_methods=_scope(methods, is_static=True),
            static_events=_scope(events, is_static=True),
        )

    @staticmethod
    def _visible(members: Sequence[MemberInfo]) -> list:
        """Drop special-name members and anything not public or protected."""
        return [
            m
            for m in members
            if not m.is_special_name and (m.is_family or m.is_public)
        ]


def _scope(members: Iterable[MemberInfo], *, is_static: bool) -> tuple:
    return tuple(m for m in members if m.is_static == is_static)
