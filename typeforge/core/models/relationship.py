"""
Relationship Model for TypeForge.

A Relationship is a directed, labelled edge between two entity names.
It has no identity beyond its three fields, and identical triples are
kept as separate records.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RelationType(str, Enum):
    """Edge labels produced by the relationship rules."""
    INHERITS = "inherits"          # base -> derived
    REFERENCES = "references"      # foreign-key-like property -> referenced entity
    HAS_CHILDREN = "has_children"  # owner -> collection element entity
    ENUM = "enum"                  # owner -> enum type of a property


class Relationship(BaseModel):
    """Graph edge between two entities.

    Attributes:
        from_entity: Source entity name (the base type for inheritance)
        to_entity: Target entity name (the derived type for inheritance)
        key: Relationship label
    """

    model_config = ConfigDict(frozen=True)

    from_entity: str
    to_entity: str
    key: RelationType

    def __str__(self) -> str:
        return f"Relationship({self.from_entity} --[{self.key.value}]--> {self.to_entity})"

    def __repr__(self) -> str:
        return f"<Relationship {self.from_entity}->{self.to_entity} key={self.key.value}>"

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.from_entity, self.to_entity, self.key.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "from_entity": self.from_entity,
            "to_entity": self.to_entity,
            "key": self.key.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Relationship":
        return cls(
            from_entity=data["from_entity"],
            to_entity=data["to_entity"],
            key=RelationType(data["key"]),
        )
