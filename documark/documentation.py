"""The documentation oracle: visible types, cref resolution and doc comments."""

import logging
import xml.etree.ElementTree as ET

from documark.assembly_info import AssemblyInfo
from documark.doc_ids import doc_id_of
from documark.is_visible import PUBLIC
from documark.member_info import MemberInfo
from documark.type_info import TypeInfo
from documark.type_ref import TypeRef

logger = logging.getLogger(__name__)

MEMBER_ID_PREFIXES = ("M:", "P:", "F:", "E:")


def _has_prefix(key: str) -> bool:
    return len(key) > 2 and key[1] == ":"


class Documentation:
    """Answers which types exist and what documentation is attached to them.

    Types and members are indexed by documentation ID across every added
    assembly, so a cref in one assembly can resolve to a type in another.
    """

    def __init__(self) -> None:
        """Initialize an empty index."""
        self.types_by_id: dict[str, TypeInfo] = {}
        self.members_by_id: dict[str, MemberInfo] = {}
        self.members_by_name: dict[str, MemberInfo] = {}  # ID without parameters
        self.comments: dict[str, ET.Element] = {}

    def add_assembly(
        self,
        assembly: AssemblyInfo,
        comments: dict[str, ET.Element] | None = None,
    ) -> None:
        """Index an assembly's types and members and its doc comments."""
        for type_info in assembly.types:
            self.types_by_id[doc_id_of(type_info)] = type_info
            for member in type_info.declared_members():
                key = doc_id_of(member)
                self.members_by_id[key] = member
                self.members_by_name.setdefault(key.split("(")[0], member)
        self.comments.update(comments or {})
        logger.debug(
            "Indexed %s: %d types, %d comments",
            assembly.name,
            len(assembly.types),
            len(comments or {}),
        )

    def get_visible_types(self, assembly: AssemblyInfo) -> list[TypeInfo]:
        """Return the public, non compiler-generated types in declaration order."""
        return [
            t for t in assembly.types if t.access == PUBLIC and "<" not in t.name
        ]

    def try_get_type(self, key: str) -> TypeInfo | None:
        """Resolve a cref to a known type."""
        if not _has_prefix(key):
            key = f"T:{key}"
        return self.types_by_id.get(key)

    def try_get_member_info(self, key: str) -> MemberInfo | None:
        """Resolve a cref to a known member.

        A cref without a parameter list resolves to the first declared overload.
        """
        if _has_prefix(key):
            candidates = [key]
        else:
            candidates = [p + key for p in MEMBER_ID_PREFIXES]
        for candidate in candidates:
            member = self.members_by_id.get(candidate)
            if member is None:
                member = self.members_by_name.get(candidate)
            if member is not None:
                return member
        return None

    def get_documentation(self, entity: TypeInfo | MemberInfo) -> ET.Element | None:
        """Return the <member> doc comment attached to a type or member."""
        return self.comments.get(doc_id_of(entity))

    def get_attributes(self, entity: TypeInfo | MemberInfo) -> list[TypeRef]:
        """Return the types of the custom attributes applied to an entity."""
        return list(entity.attributes)
