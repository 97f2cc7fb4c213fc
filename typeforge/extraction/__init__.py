"""
Extraction - entity collection and relationship inference.

Provides:
- EntityCollector: descriptors -> deduplicated entities
- RelationshipInferencer: inheritance, reference, has-children and enum rules
- ExtractionOrchestrator / extract(): both passes in one call
"""

from typeforge.extraction.collector import EntityCollector
from typeforge.extraction.inference import RelationshipInferencer
from typeforge.extraction.orchestrator import (
    ExtractionOptions,
    ExtractionOrchestrator,
    ExtractionResult,
    extract,
)

__all__ = [
    "EntityCollector",
    "RelationshipInferencer",
    "ExtractionOptions",
    "ExtractionOrchestrator",
    "ExtractionResult",
    "extract",
]
