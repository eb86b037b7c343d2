"""Data models for an assembly and its target framework."""

from dataclasses import dataclass, field

from documark.type_info import TypeInfo
from documark.type_ref import TypeRef


@dataclass(frozen=True)
class FrameworkInfo:
    """The target framework an assembly was built against."""

    name: str
    display_name: str = ""


@dataclass(eq=False)
class AssemblyInfo:
    """A compiled type library described by its public metadata."""

    name: str
    framework: FrameworkInfo | None = None
    references: list[str] = field(default_factory=list)
    types: list[TypeInfo] = field(default_factory=list)
    attributes: list[TypeRef] = field(default_factory=list)
