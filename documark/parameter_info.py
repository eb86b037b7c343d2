"""Data model for method and constructor parameters."""

from dataclasses import dataclass
from typing import Any

from documark.type_ref import TypeRef


@dataclass(frozen=True)
class ParameterInfo:
    """A single parameter of a method, constructor or delegate."""

    name: str
    parameter_type: TypeRef
    direction: str | None = None  # ref/out/in for by-reference parameters
    is_params: bool = False
    is_optional: bool = False
    default_value: Any = None

    @property
    def is_by_ref(self) -> bool:
        """Check if the parameter is passed by reference."""
        return self.direction is not None or self.parameter_type.name.endswith("&")
