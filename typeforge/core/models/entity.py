"""
Entity Model for TypeForge.

An Entity is one node of the extracted graph: a scanned class or enum
together with its property (or member) metadata.

Attribute layout:
- class entity: ``{"<PropertyName>": {"Type": "<TypeName>"}}``, where a
  single-level collection records ``"List<ElementName>"``
- enum entity: ``{"Values": ["<Member>", ...]}``
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from typeforge.core.models.descriptor import TypeKind


TYPE_KEY = "Type"
VALUES_KEY = "Values"
UNKNOWN_TYPE_NAME = "Unknown"


def list_marker(element_type_name: str | None) -> str:
    """Build the ``List<Element>`` marker recorded for collection properties."""
    return f"List<{element_type_name or UNKNOWN_TYPE_NAME}>"


class Entity(BaseModel):
    """Graph node representing a scanned class or enum.

    Attributes:
        name: Simple type name, unique within one extraction run
        kind: Whether the entity came from a class or an enum descriptor
        attributes: Ordered property name -> attribute descriptor mapping
    """

    name: str
    kind: TypeKind = TypeKind.CLASS
    attributes: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return f"Entity({self.name}, kind={self.kind.value}, {len(self.attributes)} attributes)"

    def __repr__(self) -> str:
        return f"<Entity name={self.name!r} kind={self.kind.value}>"

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM

    @property
    def values(self) -> list[str]:
        """Member names of an enum entity (empty for classes)."""
        return list(self.attributes.get(VALUES_KEY, [])) if self.is_enum else []

    def get_attr(self, key: str, default: Any = None) -> Any:
        """Get an attribute descriptor by property name."""
        return self.attributes.get(key, default)

    def type_of(self, property_name: str) -> str | None:
        """Recorded type name of a class property, or None if absent."""
        attr = self.attributes.get(property_name)
        if isinstance(attr, dict):
            return attr.get(TYPE_KEY)
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "attributes": {
                key: (dict(value) if isinstance(value, dict) else list(value))
                for key, value in self.attributes.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entity":
        """Create an Entity from :meth:`to_dict` output."""
        return cls(
            name=data["name"],
            kind=TypeKind(data.get("kind", "class")),
            attributes=data.get("attributes", {}),
        )
