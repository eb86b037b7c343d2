"""Data model for references to types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeRef:
    """Refers to a type by name, as it appears in a signature or inheritance list."""

    name: str  # may carry an arity marker (List`1), [] or & suffixes, or Outer+Inner
    namespace: str | None = None
    generic_arguments: tuple["TypeRef", ...] = ()
