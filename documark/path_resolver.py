"""Logic for mapping types and members to output file paths."""

from pathlib import Path

from documark.errors import MissingMetadataError
from documark.human_name import human_name
from documark.member_info import MemberInfo
from documark.member_name import member_name
from documark.sanitizer import Sanitizer
from documark.type_info import TypeInfo

DEFAULT_OUTPUT_ROOT = "./Generated"


class PathResolver:
    """Maps every documented entity to a file under its assembly's root.

    Paths depend only on the assembly name, the namespace and the display
    names involved, so members sharing a display name share a file.
    """

    def __init__(
        self,
        extension: str,
        output_root: str | Path = DEFAULT_OUTPUT_ROOT,
        sanitizer: Sanitizer | None = None,
    ) -> None:
        """Initialize with the backend extension and the base output directory."""
        self.extension = extension.lstrip(".")
        self.output_root = Path(output_root)
        self.sanitizer = sanitizer or Sanitizer()

    def root_for(self, assembly_name: str) -> Path:
        """Return ./Generated/<AssemblyName>."""
        return self.output_root / self.sanitizer.normalize(assembly_name)

    def root_directory(self, entity: TypeInfo | MemberInfo) -> Path:
        """Return the root directory of the assembly declaring an entity."""
        owner = self._owner(entity)
        if owner.assembly is None:
            msg = f"Type {owner.full_name} does not belong to an assembly"
            raise MissingMetadataError(msg)
        return self.root_for(owner.assembly.name)

    def file_name(self, entity: TypeInfo | MemberInfo) -> str:
        """Return <Namespace>.<Type>[.<Member>].<ext>, sanitized."""
        owner = self._owner(entity)
        parts = [owner.namespace] if owner.namespace else []
        parts.append(human_name(owner))
        if isinstance(entity, MemberInfo):
            parts.append(member_name(entity))
        parts.append(self.extension)
        return self.sanitizer.normalize(".".join(parts))

    def path_for(self, entity: TypeInfo | MemberInfo) -> Path:
        """Return the path of the document for a type or an overload group."""
        return self.root_directory(entity) / self.file_name(entity)

    def dependency_link(self, assembly_name: str) -> str:
        """Return the relative link from one assembly root to another."""
        return f"../{self.sanitizer.normalize(assembly_name)}/"

    @staticmethod
    def _owner(entity: TypeInfo | MemberInfo) -> TypeInfo:
        if isinstance(entity, TypeInfo):
            return entity
        if entity.declaring_type is None:
            msg = f"Member {entity.name} has no declaring type"
            raise ValueError(msg)
        return entity.declaring_type
