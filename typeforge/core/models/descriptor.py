"""
Type Descriptor Models for TypeForge.

A descriptor is the plain-data description of one scanned class or enum.
Descriptors are produced by providers (Python modules, namespaces, schema
files) and consumed by the extraction engine, which never touches a live
type system itself.

Both snake_case field names and their camelCase aliases are accepted, so
descriptor mappings written as

    {"kind": "class", "name": "Order", "baseTypeName": None,
     "properties": [{"name": "CustomerId", "declaredTypeName": "int"}]}

validate the same as the keyword form.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


# ============================================================================
# Enums
# ============================================================================


class TypeKind(str, Enum):
    """Kind of a scanned type."""
    CLASS = "class"
    ENUM = "enum"


# ============================================================================
# Descriptor Models
# ============================================================================


class _DescriptorModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PropertyDescriptor(_DescriptorModel):
    """One declared property of a class descriptor.

    Attributes:
        name: Property name as declared
        declared_type_name: Name of the declared type (nullable already unwrapped)
        is_enum: Whether the declared type is an enumeration
        is_single_level_collection: Whether the type is a ``List<T>``-style collection
        element_type_name: Element type of the collection, if known
        nullable: Whether a nullable wrapper was unwrapped to get the type name
    """

    name: str
    declared_type_name: str = ""
    is_enum: bool = False
    is_single_level_collection: bool = False
    element_type_name: str | None = None
    nullable: bool = False


class ClassDescriptor(_DescriptorModel):
    """Descriptor for a scanned class."""

    kind: Literal["class"] = "class"
    name: str
    base_type_name: str | None = None
    properties: list[PropertyDescriptor] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"ClassDescriptor({self.name}, {len(self.properties)} properties)"


class EnumDescriptor(_DescriptorModel):
    """Descriptor for a scanned enumeration."""

    kind: Literal["enum"] = "enum"
    name: str
    member_names: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"EnumDescriptor({self.name}, {len(self.member_names)} members)"


TypeDescriptor = Annotated[
    Union[ClassDescriptor, EnumDescriptor],
    Field(discriminator="kind"),
]

_descriptor_adapter: TypeAdapter[ClassDescriptor | EnumDescriptor] = TypeAdapter(TypeDescriptor)


# ============================================================================
# Coercion Helpers
# ============================================================================


def coerce_descriptor(item: Any) -> ClassDescriptor | EnumDescriptor:
    """Validate a single descriptor given as a model or a mapping.

    Mappings without a ``kind`` are treated as enums when they carry member
    names and as classes otherwise.

    Raises:
        pydantic.ValidationError: If the mapping does not fit the input contract
    """
    if isinstance(item, (ClassDescriptor, EnumDescriptor)):
        return item

    if isinstance(item, Mapping) and "kind" not in item:
        is_enum = "member_names" in item or "memberNames" in item
        item = {**item, "kind": TypeKind.ENUM.value if is_enum else TypeKind.CLASS.value}
    elif isinstance(item, Mapping) and isinstance(item["kind"], TypeKind):
        item = {**item, "kind": item["kind"].value}

    return _descriptor_adapter.validate_python(item)


def coerce_descriptors(items: Iterable[Any]) -> list[ClassDescriptor | EnumDescriptor]:
    """Validate an ordered sequence of descriptors, preserving order."""
    return [coerce_descriptor(item) for item in items]
