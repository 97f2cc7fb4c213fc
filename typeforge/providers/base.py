"""
Base classes and protocols for descriptor providers.

Defines the DescriptorProvider protocol and the loader error types.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from typeforge.core.models.descriptor import (
    ClassDescriptor,
    EnumDescriptor,
    coerce_descriptors,
)


# ============================================================================
# Exceptions
# ============================================================================


class DescriptorSourceError(Exception):
    """Base exception for failures while obtaining descriptors."""

    def __init__(
        self,
        message: str,
        source: str | Path | None = None,
    ):
        super().__init__(message)
        self.source = source


class ModuleLoadError(DescriptorSourceError):
    """Module path does not exist or cannot be loaded."""
    pass


class NamespaceNotFoundError(DescriptorSourceError):
    """Requested namespace yielded no types."""
    pass


class SchemaLoadError(DescriptorSourceError):
    """Schema file is missing, unparsable, or invalid."""
    pass


# ============================================================================
# Protocols
# ============================================================================


@runtime_checkable
class DescriptorProvider(Protocol):
    """Anything that can supply an ordered descriptor sequence."""

    def get_descriptors(self) -> list[ClassDescriptor | EnumDescriptor]:
        """Return descriptors in scan order."""
        ...


class StaticDescriptorProvider:
    """Provider over an in-memory list of descriptors or mappings."""

    def __init__(self, items: Iterable[Any]):
        self._descriptors = coerce_descriptors(items)

    def get_descriptors(self) -> list[ClassDescriptor | EnumDescriptor]:
        return list(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)
