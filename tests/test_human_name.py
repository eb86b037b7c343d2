"""Tests for human-readable type names."""

from documark.human_name import human_name
from documark.type_info import TypeInfo
from documark.type_ref import TypeRef


def test_plain_names() -> None:
    """Verify that non-generic names pass through."""
    assert human_name(TypeRef("Widget", "Sample")) == "Widget"
    assert human_name(TypeRef("T")) == "T"


def test_keyword_aliases() -> None:
    """Verify that well-known System types render as their keywords."""
    assert human_name(TypeRef("Int32", "System")) == "int"
    assert human_name(TypeRef("String", "System")) == "string"
    assert human_name(TypeRef("Object", "System")) == "object"
    assert human_name(TypeRef("Int32", "Other")) == "Int32"


def test_suffixes_are_preserved() -> None:
    """Verify that array and by-ref decorations stay on the name."""
    assert human_name(TypeRef("Int32[]", "System")) == "int[]"
    assert human_name(TypeRef("Int32&", "System")) == "int&"


def test_arity_marker_is_stripped() -> None:
    """Verify that the backtick arity suffix is removed."""
    assert human_name(TypeRef("List`1", "System.Collections.Generic")) == "List"


def test_generic_arguments() -> None:
    """Verify generic arguments are joined with a pipe, recursively."""
    dictionary = TypeRef(
        "Dictionary`2",
        "System.Collections.Generic",
        (TypeRef("String", "System"), TypeRef("Int32", "System")),
    )
    assert human_name(dictionary) == "Dictionary<string|int>"

    nested = TypeRef(
        "List`1",
        "System.Collections.Generic",
        (dictionary,),
    )
    assert human_name(nested) == "List<Dictionary<string|int>>"


def test_nested_type() -> None:
    """Verify that the nested type separator renders as a dot."""
    assert human_name(TypeRef("Outer+Inner", "Sample")) == "Outer.Inner"


def test_declared_generic_type() -> None:
    """Verify that declared types render with their generic parameters."""
    cache = TypeInfo(
        name="Cache`2",
        namespace="Sample",
        generic_arguments=(TypeRef("TKey"), TypeRef("TValue")),
    )
    assert human_name(cache) == "Cache<TKey|TValue>"
