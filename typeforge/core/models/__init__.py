"""
Core Models - Descriptors, Entity and Relationship.
"""

from typeforge.core.models.descriptor import (
    ClassDescriptor,
    EnumDescriptor,
    PropertyDescriptor,
    TypeDescriptor,
    TypeKind,
    coerce_descriptor,
    coerce_descriptors,
)
from typeforge.core.models.entity import Entity, UNKNOWN_TYPE_NAME
from typeforge.core.models.relationship import Relationship, RelationType

__all__ = [
    "ClassDescriptor",
    "EnumDescriptor",
    "PropertyDescriptor",
    "TypeDescriptor",
    "TypeKind",
    "coerce_descriptor",
    "coerce_descriptors",
    "Entity",
    "UNKNOWN_TYPE_NAME",
    "Relationship",
    "RelationType",
]
