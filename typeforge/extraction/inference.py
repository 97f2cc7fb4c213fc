"""
Relationship Inferencer.

Second pass of an extraction. Four independent rules run against every
class descriptor, reading the entity index built by the collector:

- inheritance: base -> derived, emitted even for bases outside the scan
- foreign-key reference: ``<Entity><suffix>`` string/int properties
  (naming heuristics only)
- has-children: ``List<Entity>`` navigation properties
- enum usage: enum-typed properties

Per descriptor, properties are visited in declaration order running the
foreign-key, has-children and enum rules on each; inheritance comes last.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from typeforge.core.models.descriptor import ClassDescriptor, EnumDescriptor, PropertyDescriptor
from typeforge.core.models.entity import Entity
from typeforge.core.models.relationship import Relationship, RelationType
from typeforge.core.typenames import element_type_name, unwrap_nullable_name
from typeforge.utils.logging import get_logger

logger = get_logger("extraction.inference")

ROOT_TYPE_NAMES = frozenset({"object", "Object", "System.Object"})

STRING_KEY_TYPE_NAMES = frozenset({"string", "String", "System.String", "str"})
INT_KEY_TYPE_NAMES = frozenset({"int", "Int32", "System.Int32", "int32"})


def is_key_type(prop: PropertyDescriptor) -> bool:
    """Whether a property's declared type can hold a foreign key.

    Integers must be declared non-nullable (``int?``, ``Nullable<int>`` and
    ``Optional[int]`` are distinct types). Strings are accepted with or
    without a nullable wrapper.
    """
    declared = (prop.declared_type_name or "").strip()
    if declared in INT_KEY_TYPE_NAMES:
        return not prop.nullable
    return unwrap_nullable_name(declared) in STRING_KEY_TYPE_NAMES


def resolve_candidate(candidate: str, entity_index: Mapping[str, Entity]) -> str | None:
    """Resolve a foreign-key candidate name to a known entity.

    An exact match wins. Otherwise the single entity whose name ends with
    the candidate at a PascalCase boundary is used (``ParentEntity`` ->
    ``TestParentEntity``); zero or several such entities resolve to None.

    The suffix match can link unrelated types: with ``VipCustomer`` as the
    only ``*Customer`` entity, ``CustomerId`` references ``VipCustomer``.
    """
    if not candidate:
        return None
    if candidate in entity_index:
        return candidate
    if not candidate[0].isupper():
        return None

    matches = [
        name for name in entity_index
        if len(name) > len(candidate) and name.endswith(candidate)
    ]
    if len(matches) == 1:
        return matches[0]
    if matches:
        logger.debug(f"Ambiguous foreign-key candidate '{candidate}': {matches}")
    return None


class RelationshipInferencer:
    """Applies the relationship rules to class descriptors.

    Usage:
        inferencer = RelationshipInferencer(use_naming_heuristics=True)
        relationships = inferencer.infer(descriptors, entity_index)
    """

    def __init__(
        self,
        use_naming_heuristics: bool = False,
        foreign_key_suffix: str = "Id",
        primary_key_name: str = "Id",
    ):
        """Initialize the inferencer.

        Args:
            use_naming_heuristics: Enable the foreign-key reference rule
            foreign_key_suffix: Property-name suffix marking a foreign key
            primary_key_name: Accepted for configuration parity; not used in matching
        """
        self.use_naming_heuristics = use_naming_heuristics
        self.foreign_key_suffix = foreign_key_suffix
        self.primary_key_name = primary_key_name

    def infer(
        self,
        descriptors: Sequence[ClassDescriptor | EnumDescriptor],
        entity_index: Mapping[str, Entity],
    ) -> list[Relationship]:
        """Infer relationships for every class descriptor in order."""
        relationships: list[Relationship] = []
        for descriptor in descriptors:
            if not isinstance(descriptor, ClassDescriptor):
                continue
            relationships.extend(self.infer_for(descriptor, entity_index))
        return relationships

    def infer_for(
        self,
        descriptor: ClassDescriptor,
        entity_index: Mapping[str, Entity],
    ) -> list[Relationship]:
        """Infer the relationships sourced at one class descriptor."""
        found: list[Relationship] = []

        for prop in descriptor.properties:
            for rule in (self._foreign_key, self._has_children, self._enum_usage):
                rel = rule(descriptor.name, prop, entity_index)
                if rel is not None:
                    found.append(rel)

        rel = self._inheritance(descriptor)
        if rel is not None:
            found.append(rel)

        for rel in found:
            logger.debug(str(rel))
        return found

    # ========== Rules ==========

    def _foreign_key(
        self,
        owner: str,
        prop: PropertyDescriptor,
        entity_index: Mapping[str, Entity],
    ) -> Relationship | None:
        if not self.use_naming_heuristics:
            return None

        suffix = self.foreign_key_suffix
        if not prop.name.endswith(suffix):
            return None
        if not is_key_type(prop):
            return None

        candidate = prop.name[: len(prop.name) - len(suffix)]
        target = resolve_candidate(candidate, entity_index)
        if target is None:
            return None

        return Relationship(from_entity=owner, to_entity=target, key=RelationType.REFERENCES)

    def _has_children(
        self,
        owner: str,
        prop: PropertyDescriptor,
        entity_index: Mapping[str, Entity],
    ) -> Relationship | None:
        if not prop.is_single_level_collection:
            return None

        element = element_type_name(prop.element_type_name)
        if not element or element not in entity_index:
            return None

        return Relationship(from_entity=owner, to_entity=element, key=RelationType.HAS_CHILDREN)

    def _enum_usage(
        self,
        owner: str,
        prop: PropertyDescriptor,
        entity_index: Mapping[str, Entity],
    ) -> Relationship | None:
        if not prop.is_enum:
            return None

        enum_name = unwrap_nullable_name(prop.declared_type_name)
        if enum_name not in entity_index:
            return None

        return Relationship(from_entity=owner, to_entity=enum_name, key=RelationType.ENUM)

    def _inheritance(self, descriptor: ClassDescriptor) -> Relationship | None:
        base = descriptor.base_type_name
        if not base or base in ROOT_TYPE_NAMES:
            return None

        return Relationship(from_entity=base, to_entity=descriptor.name, key=RelationType.INHERITS)
