"""Logic for the short modifier and attribute labels shown next to an entity."""

from documark.backend import Backend
from documark.documentation import Documentation
from documark.human_name import human_name
from documark.member_info import (
    FieldInfo,
    MemberInfo,
    MethodInfo,
    PropertyInfo,
)
from documark.type_info import TypeInfo


class BadgeComposer:
    """Derives badges (Static, Read Only, attribute names, ...) and renders them."""

    def __init__(self, documentation: Documentation, backend: Backend) -> None:
        """Initialize with the attribute source and the output backend."""
        self.documentation = documentation
        self.backend = backend

    def labels(
        self,
        entity: TypeInfo | MemberInfo,
        *,
        is_static: bool = False,
    ) -> list[str]:
        """Return the ordered badge labels: static, modality, visibility, attributes."""
        badges: list[str] = []

        if isinstance(entity, PropertyInfo):
            if is_static:
                badges.append("Static")
            can_read = entity.getter is not None and entity.getter.is_visible
            can_write = entity.setter is not None and entity.setter.is_visible
            if not can_read or not can_write:
                if can_read:
                    badges.append("Read Only")
                if can_write:
                    badges.append("Write Only")

        elif isinstance(entity, FieldInfo):
            if is_static:
                badges.append("Static")
            if entity.is_init_only:
                badges.append("Read Only")

        elif isinstance(entity, MethodInfo):
            if is_static:
                badges.append("Static")
            if entity.is_abstract:
                badges.append("Abstract")
            elif entity.is_virtual:
                badges.append("Virtual")
            if entity.is_family:
                badges.append("Protected")

        # Types and constructors only carry attribute badges
        badges.extend(self.attribute_labels(entity))
        return badges

    def attribute_labels(self, entity: TypeInfo | MemberInfo) -> list[str]:
        """Name every custom attribute applied to an entity."""
        return [human_name(a) for a in self.documentation.get_attributes(entity)]

    def render(
        self,
        entity: TypeInfo | MemberInfo,
        *,
        is_static: bool = False,
    ) -> str:
        """Render the badges as one inline token list, or '' when there are none."""
        return self.badge_text(self.labels(entity, is_static=is_static))

    def badge_text(self, labels: list[str]) -> str:
        if not labels:
            return ""
        return ", ".join(self.backend.badge(s) for s in labels).strip() + "\n"
