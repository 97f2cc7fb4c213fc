"""Export Service for TypeForge.

Hands extraction results to downstream consumers as a JSON document or a
NetworkX graph. Nothing here draws or lays out the graph.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import networkx as nx

from typeforge.extraction.orchestrator import ExtractionResult
from typeforge.utils.logging import get_logger

logger = get_logger("export")

FORMAT_VERSION = "1.0"


class ExportService:
    """Converts extraction results into export formats.

    Usage:
        exporter = ExportService()
        exporter.export_json(result, Path("graph.json"))
        graph = exporter.to_networkx(result)
    """

    def to_dict(self, result: ExtractionResult) -> dict[str, Any]:
        """Convert a result to a JSON-ready dictionary."""
        entities, relationships = result
        return {
            "format_version": FORMAT_VERSION,
            "entity_count": len(entities),
            "relationship_count": len(relationships),
            "entities": [entity.to_dict() for entity in entities],
            "relationships": [rel.to_dict() for rel in relationships],
        }

    def to_json(self, result: ExtractionResult, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(result), indent=indent, ensure_ascii=False)

    def export_json(self, result: ExtractionResult, output_path: str | Path) -> Path:
        """Write a result to a JSON file.

        Args:
            result: Extraction result
            output_path: Destination file (parent directories are created)

        Returns:
            Path to exported file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        export_data = {
            "export_timestamp": datetime.now(UTC).isoformat(),
            **self.to_dict(result),
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)

        logger.info(
            f"Exported {len(result.entities)} entities and "
            f"{len(result.relationships)} relationships to {output_path}"
        )
        return output_path

    def to_networkx(self, result: ExtractionResult) -> nx.MultiDiGraph:
        """Build a multi-digraph with one edge per relationship.

        Endpoints that are not entities of the result (bases outside the
        scanned set) become nodes with ``external=True``.
        """
        graph = nx.MultiDiGraph()

        for entity in result.entities:
            graph.add_node(
                entity.name,
                kind=entity.kind.value,
                attributes=dict(entity.attributes),
                external=False,
            )

        for rel in result.relationships:
            for endpoint in (rel.from_entity, rel.to_entity):
                if endpoint not in graph:
                    graph.add_node(endpoint, kind=None, attributes={}, external=True)
            # auto-numbered edge keys keep identical triples as separate edges
            graph.add_edge(rel.from_entity, rel.to_entity, relation=rel.key.value)

        logger.debug(
            f"Graph built: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges"
        )
        return graph
