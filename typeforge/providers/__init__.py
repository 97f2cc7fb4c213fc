"""
Providers - sources of type descriptors.

- StaticDescriptorProvider: in-memory descriptors or mappings
- ModuleDescriptorProvider: a Python module file loaded from disk
- NamespaceDescriptorProvider: classes of an importable module namespace
- SchemaFileDescriptorProvider: a static YAML/JSON schema file
"""

from typeforge.providers.base import (
    DescriptorProvider,
    DescriptorSourceError,
    ModuleLoadError,
    NamespaceNotFoundError,
    SchemaLoadError,
    StaticDescriptorProvider,
)
from typeforge.providers.introspection import (
    ModuleDescriptorProvider,
    NamespaceDescriptorProvider,
    describe_module,
    describe_type,
)
from typeforge.providers.schema_file import SchemaFileDescriptorProvider

__all__ = [
    "DescriptorProvider",
    "DescriptorSourceError",
    "ModuleLoadError",
    "NamespaceNotFoundError",
    "SchemaLoadError",
    "StaticDescriptorProvider",
    "ModuleDescriptorProvider",
    "NamespaceDescriptorProvider",
    "describe_module",
    "describe_type",
    "SchemaFileDescriptorProvider",
]
