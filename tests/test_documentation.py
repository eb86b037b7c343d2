"""Tests for documentation IDs and the documentation oracle."""

from pathlib import Path

import pytest

from documark.doc_ids import doc_id_of
from documark.documentation import Documentation
from documark.errors import MetadataFormatError
from documark.load_assembly import load_assembly
from documark.load_doc_comments import load_doc_comments, parse_doc_comments
from documark.member_info import ConstructorInfo, MethodInfo
from documark.parameter_info import ParameterInfo
from documark.type_info import TypeInfo
from documark.type_ref import TypeRef

DATA = Path(__file__).parent / "data"


def create_documentation() -> Documentation:
    """Index the sample assembly with its doc comments."""
    documentation = Documentation()
    assembly = load_assembly(DATA / "Sample.yml")
    documentation.add_assembly(assembly, load_doc_comments(DATA / "Sample.xml"))
    return documentation


def test_doc_id_of_type_and_members() -> None:
    """Verify IDs for types, overloads and constructors."""
    cache = TypeInfo(
        name="Cache`1",
        namespace="Sample",
        generic_arguments=(TypeRef("T"),),
    )
    get = MethodInfo(
        name="Get",
        generic_arguments=(TypeRef("U"),),
        parameters=[
            ParameterInfo("key", TypeRef("U")),
            ParameterInfo("fallback", TypeRef("T")),
            ParameterInfo("count", TypeRef("Int32&", "System"), direction="out"),
        ],
        declaring_type=cache,
    )
    ctor = ConstructorInfo(
        parameters=[ParameterInfo("capacity", TypeRef("Int32", "System"))],
        declaring_type=cache,
    )

    assert doc_id_of(cache) == "T:Sample.Cache`1"
    assert doc_id_of(get) == "M:Sample.Cache`1.Get``1(``0,`0,System.Int32@)"
    assert doc_id_of(ctor) == "M:Sample.Cache`1.#ctor(System.Int32)"


def test_doc_id_of_generic_parameter_type() -> None:
    """Verify constructed generic parameter types use braces."""
    owner = TypeInfo(name="Bag", namespace="Sample")
    add = MethodInfo(
        name="AddRange",
        parameters=[
            ParameterInfo(
                "items",
                TypeRef(
                    "IEnumerable`1",
                    "System.Collections.Generic",
                    (TypeRef("String", "System"),),
                ),
            )
        ],
        declaring_type=owner,
    )
    assert doc_id_of(add) == (
        "M:Sample.Bag.AddRange(System.Collections.Generic.IEnumerable{System.String})"
    )


def test_visible_types_in_declaration_order() -> None:
    """Verify internal types are hidden and order is preserved."""
    documentation = Documentation()
    assembly = load_assembly(DATA / "Sample.yml")
    documentation.add_assembly(assembly)
    visible = documentation.get_visible_types(assembly)
    assert [t.name for t in visible] == ["Widget", "Shape", "Color", "Callback"]


def test_try_get_type() -> None:
    """Verify type crefs resolve with or without the T: prefix."""
    documentation = create_documentation()
    shape = documentation.try_get_type("T:Sample.Shape")
    assert shape is not None
    assert shape.name == "Shape"
    assert documentation.try_get_type("Sample.Shape") is shape
    assert documentation.try_get_type("T:Sample.Missing") is None
    assert documentation.try_get_type("M:Sample.Widget.Create(System.Int32)") is None


def test_try_get_member_info() -> None:
    """Verify member crefs resolve exactly or to the first overload."""
    documentation = create_documentation()
    create = documentation.try_get_member_info("M:Sample.Widget.Create(System.Int32)")
    assert create is not None
    assert create.name == "Create"

    first_draw = documentation.try_get_member_info("M:Sample.Shape.Draw")
    assert isinstance(first_draw, MethodInfo)
    assert first_draw.parameters == []

    by_name = documentation.try_get_member_info("Sample.Shape.Changed")
    assert by_name is not None
    assert by_name.name == "Changed"

    assert documentation.try_get_member_info("M:Sample.Unknown.Thing") is None


def test_get_documentation() -> None:
    """Verify doc comments are matched by documentation ID."""
    documentation = create_documentation()
    create = documentation.try_get_member_info("M:Sample.Widget.Create(System.Int32)")
    assert create is not None
    comment = documentation.get_documentation(create)
    assert comment is not None
    assert comment.find("returns") is not None

    shape = documentation.try_get_type("Sample.Shape")
    assert shape is not None
    origin = shape.fields[0]
    assert documentation.get_documentation(origin) is None


def test_get_attributes() -> None:
    """Verify attributes are exposed through the oracle."""
    documentation = create_documentation()
    shape = documentation.try_get_type("Sample.Shape")
    assert shape is not None
    assert documentation.get_attributes(shape) == [
        TypeRef("SerializableAttribute", "System")
    ]


def test_parse_doc_comments() -> None:
    """Verify members are keyed by their name attribute."""
    comments = parse_doc_comments(
        "<doc><members>"
        '<member name="T:A.B"><summary>Hi</summary></member>'
        "<member><summary>No name</summary></member>"
        "</members></doc>"
    )
    assert list(comments) == ["T:A.B"]


def test_load_doc_comments_missing_file(tmp_path: Path) -> None:
    """Verify a missing documentation file yields no comments."""
    assert load_doc_comments(tmp_path / "Missing.xml") == {}


def test_parse_doc_comments_invalid() -> None:
    """Verify malformed XML is reported as a metadata error."""
    with pytest.raises(MetadataFormatError):
        parse_doc_comments("<doc><members>")
