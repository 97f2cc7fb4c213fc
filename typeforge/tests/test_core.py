"""
Test Suite: Core Models

Tests for descriptors, Entity and Relationship models.
"""

import pytest
from pydantic import ValidationError


def test_descriptor_accepts_camel_case_aliases():
    """Descriptors validate from the camelCase input contract."""
    print("\nTesting descriptor aliases...")

    from typeforge.core.models import ClassDescriptor, coerce_descriptor

    descriptor = coerce_descriptor({
        "kind": "class",
        "name": "Order",
        "baseTypeName": "Document",
        "properties": [
            {"name": "CustomerId", "declaredTypeName": "int"},
            {
                "name": "Lines",
                "declaredTypeName": "List<OrderLine>",
                "isSingleLevelCollection": True,
                "elementTypeName": "OrderLine",
            },
        ],
    })

    assert isinstance(descriptor, ClassDescriptor)
    assert descriptor.base_type_name == "Document"
    assert descriptor.properties[0].declared_type_name == "int"
    assert descriptor.properties[1].is_single_level_collection
    assert descriptor.properties[1].element_type_name == "OrderLine"
    print(f"  ✓ {descriptor}")


def test_descriptor_accepts_snake_case_fields():
    from typeforge.core.models import EnumDescriptor, coerce_descriptor

    descriptor = coerce_descriptor({"kind": "enum", "name": "Status", "member_names": ["A", "B"]})

    assert isinstance(descriptor, EnumDescriptor)
    assert descriptor.member_names == ["A", "B"]


def test_coerce_infers_kind_when_missing():
    from typeforge.core.models import ClassDescriptor, EnumDescriptor, TypeKind, coerce_descriptors

    items = coerce_descriptors([
        {"name": "Status", "memberNames": ["On", "Off"]},
        {"name": "Switch", "properties": []},
        {"kind": TypeKind.ENUM, "name": "Mode"},
    ])

    assert isinstance(items[0], EnumDescriptor)
    assert isinstance(items[1], ClassDescriptor)
    assert isinstance(items[2], EnumDescriptor)


def test_coerce_passes_models_through():
    from typeforge.core.models import ClassDescriptor, coerce_descriptor

    descriptor = ClassDescriptor(name="Plain")
    assert coerce_descriptor(descriptor) is descriptor


def test_unknown_kind_is_rejected():
    from typeforge.core.models import coerce_descriptor

    with pytest.raises(ValidationError):
        coerce_descriptor({"kind": "interface", "name": "IThing"})


def test_entity_dict_round_trip_and_helpers():
    """Entity helpers expose recorded types and enum values."""
    print("\nTesting entity model...")

    from typeforge.core.models import Entity, TypeKind

    ticket = Entity(
        name="Ticket",
        attributes={"Id": {"Type": "int"}, "Watchers": {"Type": "List<User>"}},
    )
    status = Entity(name="Status", kind=TypeKind.ENUM, attributes={"Values": ["Open", "Closed"]})

    assert ticket.type_of("Watchers") == "List<User>"
    assert ticket.type_of("Missing") is None
    assert not ticket.is_enum
    assert ticket.values == []
    assert status.is_enum
    assert status.values == ["Open", "Closed"]

    restored = Entity.from_dict(status.to_dict())
    assert restored == status
    print(f"  ✓ {ticket}")
    print(f"  ✓ {status}")


def test_relationship_equality_and_str_keys():
    """Relationships are plain value records keyed by a str enum."""
    print("\nTesting relationship model...")

    from typeforge.core.models import Relationship, RelationType

    rel = Relationship(from_entity="Shape", to_entity="Circle", key="inherits")

    assert rel.key is RelationType.INHERITS
    assert rel.key == "inherits"
    assert rel == Relationship(from_entity="Shape", to_entity="Circle", key=RelationType.INHERITS)
    assert rel.as_tuple() == ("Shape", "Circle", "inherits")
    assert Relationship.from_dict(rel.to_dict()) == rel
    print(f"  ✓ {rel}")


def test_relationship_rejects_unknown_key():
    from typeforge.core.models import Relationship

    with pytest.raises(ValidationError):
        Relationship(from_entity="A", to_entity="B", key="owns")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("int?", "int"),
        ("Nullable<Int32>", "Int32"),
        ("System.Nullable`1[Int32]", "Int32"),
        ("Optional[int]", "int"),
        ("typing.Optional[str]", "str"),
        ("Status | None", "Status"),
        ("None | Status", "Status"),
        ("List<Order>", "List<Order>"),
        ("", "Unknown"),
        (None, "Unknown"),
        ("   ", "Unknown"),
    ],
)
def test_unwrap_nullable_name(raw, expected):
    from typeforge.core.typenames import unwrap_nullable_name

    assert unwrap_nullable_name(raw) == expected
