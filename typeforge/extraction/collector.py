"""
Entity Collector.

First pass of an extraction: turns descriptors into entities, deduplicated
by simple name with the first occurrence winning.
"""

from __future__ import annotations

from collections.abc import Sequence

from typeforge.core.models.descriptor import (
    ClassDescriptor,
    EnumDescriptor,
    PropertyDescriptor,
    TypeKind,
)
from typeforge.core.models.entity import Entity, TYPE_KEY, VALUES_KEY, list_marker
from typeforge.core.typenames import element_type_name, unwrap_nullable_name
from typeforge.utils.logging import get_logger

logger = get_logger("extraction.collector")


def describe_property(prop: PropertyDescriptor) -> dict[str, str]:
    """Attribute descriptor recorded for one class property."""
    if prop.is_single_level_collection:
        return {TYPE_KEY: list_marker(element_type_name(prop.element_type_name))}
    return {TYPE_KEY: unwrap_nullable_name(prop.declared_type_name)}


def create_entity_from_class(descriptor: ClassDescriptor) -> Entity:
    attributes: dict[str, dict[str, str]] = {}
    for prop in descriptor.properties:
        attributes[prop.name] = describe_property(prop)
    return Entity(name=descriptor.name, kind=TypeKind.CLASS, attributes=attributes)


def create_entity_from_enum(descriptor: EnumDescriptor) -> Entity:
    return Entity(
        name=descriptor.name,
        kind=TypeKind.ENUM,
        attributes={VALUES_KEY: list(descriptor.member_names)},
    )


class EntityCollector:
    """Builds the ordered entity list and the entity index.

    Usage:
        collector = EntityCollector()
        entities, index = collector.collect(descriptors)
    """

    def collect(
        self,
        descriptors: Sequence[ClassDescriptor | EnumDescriptor],
    ) -> tuple[list[Entity], dict[str, Entity]]:
        """Collect entities in input order.

        Args:
            descriptors: Validated descriptors in scan order

        Returns:
            Tuple of (ordered entities, name -> entity index)
        """
        entities: list[Entity] = []
        index: dict[str, Entity] = {}

        for descriptor in descriptors:
            if descriptor.name in index:
                logger.debug(
                    f"Skipping duplicate {descriptor.kind} '{descriptor.name}' "
                    f"(first seen as {index[descriptor.name].kind.value})"
                )
                continue

            if isinstance(descriptor, EnumDescriptor):
                entity = create_entity_from_enum(descriptor)
            else:
                entity = create_entity_from_class(descriptor)

            entities.append(entity)
            index[entity.name] = entity

        logger.debug(f"Collected {len(entities)} entities from {len(descriptors)} descriptors")
        return entities, index
