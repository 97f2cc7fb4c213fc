"""TypeForge - entity and relationship extraction from type descriptors."""

from typeforge.core.models import (
    ClassDescriptor,
    Entity,
    EnumDescriptor,
    PropertyDescriptor,
    Relationship,
    RelationType,
    TypeKind,
)
from typeforge.extraction import (
    EntityCollector,
    ExtractionOptions,
    ExtractionOrchestrator,
    ExtractionResult,
    RelationshipInferencer,
    extract,
)
from typeforge.providers import (
    DescriptorSourceError,
    ModuleLoadError,
    NamespaceNotFoundError,
    SchemaLoadError,
)

__version__ = "1.0.0"

__all__ = [
    "ClassDescriptor",
    "Entity",
    "EnumDescriptor",
    "PropertyDescriptor",
    "Relationship",
    "RelationType",
    "TypeKind",
    "EntityCollector",
    "ExtractionOptions",
    "ExtractionOrchestrator",
    "ExtractionResult",
    "RelationshipInferencer",
    "extract",
    "DescriptorSourceError",
    "ModuleLoadError",
    "NamespaceNotFoundError",
    "SchemaLoadError",
]
