"""Tests for loading assembly metadata."""

from pathlib import Path

import pytest
import yaml

from documark.errors import MetadataFormatError
from documark.load_assembly import load_assembly, parse_assembly, parse_type_ref
from documark.member_info import MethodInfo
from documark.type_ref import TypeRef

DATA = Path(__file__).parent / "data"


def test_parse_type_ref_forms() -> None:
    """Verify dotted names, bare names and mappings."""
    assert parse_type_ref("System.Int32") == TypeRef("Int32", "System")
    assert parse_type_ref("T") == TypeRef("T")
    assert parse_type_ref(
        {
            "name": "List`1",
            "namespace": "System.Collections.Generic",
            "arguments": ["System.String"],
        }
    ) == TypeRef(
        "List`1",
        "System.Collections.Generic",
        (TypeRef("String", "System"),),
    )


def test_parse_type_ref_invalid() -> None:
    """Verify empty or nameless references are rejected."""
    with pytest.raises(MetadataFormatError):
        parse_type_ref("")
    with pytest.raises(MetadataFormatError):
        parse_type_ref({"namespace": "System"})


def test_load_sample_assembly() -> None:
    """Verify the sample file loads with back references set."""
    assembly = load_assembly(DATA / "Sample.yml")
    assert assembly.name == "Sample"
    assert assembly.framework is not None
    assert assembly.framework.display_name == ".NET Standard 2.0"
    assert assembly.references == ["netstandard", "Sample.Core"]
    assert [t.name for t in assembly.types] == [
        "Widget",
        "Shape",
        "Color",
        "Callback",
        "Hidden",
    ]

    shape = assembly.types[1]
    assert shape.is_abstract
    assert shape.assembly is assembly
    assert all(m.declaring_type is shape for m in shape.declared_members())
    assert shape.interfaces == [TypeRef("IDisposable", "System")]


def test_property_accessors() -> None:
    """Verify a missing getter key means public and null means none."""
    shape = load_assembly(DATA / "Sample.yml").types[1]
    name, area, sink = shape.properties
    assert name.getter is not None and name.getter.access == "public"
    assert name.setter is not None and name.setter.access == "protected"
    assert area.setter is None
    assert sink.getter is None


def test_method_defaults() -> None:
    """Verify return type defaults to void and defaults imply optional."""
    shape = load_assembly(DATA / "Sample.yml").types[1]
    draw = shape.methods[1]
    assert isinstance(draw, MethodInfo)
    assert shape.methods[0].return_type == TypeRef("Void", "System")
    assert draw.parameters[1].is_optional
    assert not draw.parameters[0].is_optional
    assert shape.methods[2].is_generic


def test_constructors_and_constants() -> None:
    """Verify constructor scope and constant field values."""
    assembly = load_assembly(DATA / "Sample.yml")
    shape, color = assembly.types[1], assembly.types[2]
    assert [c.is_static for c in shape.constructors] == [False, False, True]
    red = color.fields[1]
    assert red.is_literal
    assert red.constant_value == 0


@pytest.mark.parametrize(
    "doc",
    [
        None,
        ["not", "a", "mapping"],
        {"types": []},
        {"name": "A", "types": [{"namespace": "B"}]},
        {"name": "A", "types": [{"name": "T", "kind": "module"}]},
        {"name": "A", "types": [{"name": "T", "access": "friend"}]},
        {"name": "A", "types": [{"name": "T", "methods": [{"access": "public"}]}]},
    ],
)
def test_parse_assembly_invalid(doc: object) -> None:
    """Verify malformed documents raise MetadataFormatError."""
    with pytest.raises(MetadataFormatError):
        parse_assembly(doc)


def test_invalid_parameter_direction(tmp_path: Path) -> None:
    """Verify unknown parameter directions are rejected."""
    path = tmp_path / "Bad.yml"
    path.write_text(
        yaml.dump(
            {
                "name": "Bad",
                "types": [
                    {
                        "name": "T",
                        "methods": [
                            {
                                "name": "M",
                                "parameters": [
                                    {
                                        "name": "a",
                                        "type": "System.Int32",
                                        "direction": "sideways",
                                    }
                                ],
                            }
                        ],
                    }
                ],
            }
        )
    )
    with pytest.raises(MetadataFormatError):
        load_assembly(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Verify unparsable YAML is reported as a metadata error."""
    path = tmp_path / "Broken.yml"
    path.write_text("name: [unclosed\n", encoding="utf-8")
    with pytest.raises(MetadataFormatError):
        load_assembly(path)
