"""
Extraction Orchestrator.

Runs the entity collector and then the relationship inferencer over the
same descriptor sequence and returns both ordered results.

Usage:
    from typeforge import extract

    entities, relationships = extract(descriptors, use_naming_heuristics=True)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, NamedTuple

from typeforge.core.models.descriptor import (
    ClassDescriptor,
    EnumDescriptor,
    coerce_descriptors,
)
from typeforge.core.models.entity import Entity
from typeforge.core.models.relationship import Relationship
from typeforge.extraction.collector import EntityCollector
from typeforge.extraction.inference import RelationshipInferencer
from typeforge.providers.base import DescriptorProvider
from typeforge.utils.logging import get_logger, log_operation

logger = get_logger("extraction")


@dataclass(frozen=True)
class ExtractionOptions:
    """Options controlling relationship inference."""

    use_naming_heuristics: bool = False
    foreign_key_suffix: str = "Id"
    primary_key_name: str = "Id"  # carried through, not used by any rule

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractionOptions":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ExtractionResult(NamedTuple):
    """Ordered extraction output; unpacks as ``(entities, relationships)``."""

    entities: list[Entity]
    relationships: list[Relationship]

    def entity_names(self) -> list[str]:
        return [entity.name for entity in self.entities]

    def get_entity(self, name: str) -> Entity | None:
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None


def _resolve_descriptors(source: Any) -> list[ClassDescriptor | EnumDescriptor]:
    if isinstance(source, DescriptorProvider):
        source = source.get_descriptors()
    return coerce_descriptors(source)


class ExtractionOrchestrator:
    """Coordinates the two extraction passes for a fixed set of options.

    Holds no state between calls; every :meth:`run` builds its own index.
    """

    def __init__(self, options: ExtractionOptions | None = None):
        self.options = options or ExtractionOptions()
        self.collector = EntityCollector()
        self.inferencer = RelationshipInferencer(
            use_naming_heuristics=self.options.use_naming_heuristics,
            foreign_key_suffix=self.options.foreign_key_suffix,
            primary_key_name=self.options.primary_key_name,
        )

    def run(self, descriptors: Iterable[Any] | DescriptorProvider) -> ExtractionResult:
        """Extract entities and relationships.

        Args:
            descriptors: Descriptor models or mappings in scan order, or a
                provider supplying them

        Returns:
            ExtractionResult with ordered entities and relationships
        """
        items = _resolve_descriptors(descriptors)

        entities, index = self.collector.collect(items)
        relationships = self.inferencer.infer(items, index)

        log_operation(logger, "Extraction complete", {
            "descriptors": len(items),
            "entities": len(entities),
            "relationships": len(relationships),
            "heuristics": self.options.use_naming_heuristics,
        })
        return ExtractionResult(entities, relationships)


def extract(
    descriptors: Iterable[Any] | DescriptorProvider,
    options: ExtractionOptions | None = None,
    **overrides: Any,
) -> ExtractionResult:
    """Extract entities and relationships from descriptors.

    Args:
        descriptors: Descriptor models or mappings, or a provider
        options: Extraction options (defaults apply when omitted)
        **overrides: Individual option fields, e.g. ``use_naming_heuristics=True``

    Returns:
        ExtractionResult, which unpacks as ``(entities, relationships)``
    """
    options = options or ExtractionOptions()
    if overrides:
        options = replace(options, **overrides)
    return ExtractionOrchestrator(options).run(descriptors)
