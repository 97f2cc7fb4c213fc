"""
Schema File Provider.

Reads type descriptors from a static YAML or JSON file. The document is
either a list of descriptors or a mapping with a ``types`` list:

    types:
      - kind: enum
        name: Status
        memberNames: [Active, Closed]
      - kind: class
        name: Ticket
        properties:
          - {name: Id, declaredTypeName: int}
          - {name: State, declaredTypeName: Status, isEnum: true}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from typeforge.core.models.descriptor import (
    ClassDescriptor,
    EnumDescriptor,
    coerce_descriptors,
)
from typeforge.providers.base import SchemaLoadError
from typeforge.utils.logging import get_logger, log_error

logger = get_logger("providers.schema_file")

YAML_SUFFIXES = (".yaml", ".yml")


class SchemaFileDescriptorProvider:
    """Loads descriptors from a YAML/JSON schema file.

    Usage:
        provider = SchemaFileDescriptorProvider("schema/orders.yaml")
        descriptors = provider.get_descriptors()
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Any:
        if not self.path.exists():
            raise SchemaLoadError(f"Schema file not found: {self.path}", source=self.path)

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log_error(logger, "read_schema", e, {"path": self.path})
            raise SchemaLoadError(f"Cannot read schema file {self.path}: {e}", source=self.path) from e

        try:
            if self.path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(text)
            return json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            log_error(logger, "read_schema", e, {"path": self.path})
            raise SchemaLoadError(f"Cannot parse schema file {self.path}: {e}", source=self.path) from e

    def get_descriptors(self) -> list[ClassDescriptor | EnumDescriptor]:
        data = self._read()

        if isinstance(data, dict):
            data = data.get("types", [])
        if data is None:
            data = []
        if not isinstance(data, list):
            raise SchemaLoadError(
                f"Schema file must hold a list of types: {self.path}", source=self.path
            )

        try:
            descriptors = coerce_descriptors(data)
        except ValidationError as e:
            log_error(logger, "validate_schema", e, {"path": self.path})
            raise SchemaLoadError(f"Invalid type descriptor in {self.path}: {e}", source=self.path) from e

        logger.info(f"Loaded {len(descriptors)} types from {self.path}")
        return descriptors
