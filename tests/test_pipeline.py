"""Extraction Pipeline Tests.

End-to-end tests running providers, the orchestrator and the exporter together.
"""

import json
import tempfile
import unittest
from pathlib import Path

from typeforge.core.models import Entity, Relationship, RelationType
from typeforge.export import ExportService
from typeforge.extraction import ExtractionOptions, ExtractionOrchestrator
from typeforge.providers import ModuleDescriptorProvider, SchemaFileDescriptorProvider

FIXTURES = Path(__file__).parent.parent / "typeforge" / "tests" / "fixtures"


class SchemaPipelineTest(unittest.TestCase):
    """Schema file -> extraction -> JSON export -> reload."""

    def setUp(self) -> None:
        self.orchestrator = ExtractionOrchestrator(ExtractionOptions(use_naming_heuristics=True))
        self.exporter = ExportService()
        self.provider = SchemaFileDescriptorProvider(FIXTURES / "ticketing.yaml")

    def test_exported_json_reloads_into_models(self) -> None:
        """Test that exported entities and relationships rebuild the same result."""
        result = self.orchestrator.run(self.provider)

        with tempfile.TemporaryDirectory() as tmp:
            path = self.exporter.export_json(result, Path(tmp) / "graph.json")
            data = json.loads(path.read_text(encoding="utf-8"))

        entities = [Entity.from_dict(item) for item in data["entities"]]
        relationships = [Relationship.from_dict(item) for item in data["relationships"]]

        self.assertEqual(entities, result.entities)
        self.assertEqual(relationships, result.relationships)
        self.assertEqual(data["entity_count"], len(entities))
        self.assertEqual(data["relationship_count"], len(relationships))

    def test_run_is_deterministic(self) -> None:
        """Test that repeated runs over the same source give identical results."""
        first = self.orchestrator.run(self.provider)
        second = self.orchestrator.run(self.provider)

        self.assertEqual(self.exporter.to_dict(first), self.exporter.to_dict(second))

    def test_heuristics_off_drops_only_references(self) -> None:
        """Test that disabling heuristics removes references and nothing else."""
        with_refs = self.orchestrator.run(self.provider)
        without_refs = ExtractionOrchestrator(ExtractionOptions()).run(self.provider)

        expected = [r for r in with_refs.relationships if r.key is not RelationType.REFERENCES]
        self.assertEqual(without_refs.relationships, expected)
        self.assertEqual(without_refs.entities, with_refs.entities)


class ModuleGraphTest(unittest.TestCase):
    """Python module -> extraction -> NetworkX graph."""

    def setUp(self) -> None:
        provider = ModuleDescriptorProvider(FIXTURES / "sample_models.py")
        self.result = ExtractionOrchestrator(ExtractionOptions(use_naming_heuristics=True)).run(provider)
        self.graph = ExportService().to_networkx(self.result)

    def test_graph_has_node_per_entity(self) -> None:
        """Test that every entity becomes a non-external node."""
        for entity in self.result.entities:
            self.assertIn(entity.name, self.graph)
            self.assertFalse(self.graph.nodes[entity.name]["external"])

    def test_unscanned_base_is_external(self) -> None:
        """Test that a base class outside the module is an external node."""
        self.assertTrue(self.graph.nodes["BaseModel"]["external"])
        self.assertIsNone(self.graph.nodes["BaseModel"]["kind"])

    def test_edge_count_matches_relationships(self) -> None:
        """Test that duplicate enum usages stay as separate edges."""
        self.assertEqual(self.graph.number_of_edges(), len(self.result.relationships))
        self.assertEqual(self.graph.number_of_edges("Ticket", "Status"), 2)

    def test_parent_child_cycle(self) -> None:
        """Test that has_children and references form a two-way link."""
        self.assertTrue(self.graph.has_edge("TestParentEntity", "TestChildEntity"))
        self.assertTrue(self.graph.has_edge("TestChildEntity", "TestParentEntity"))


if __name__ == "__main__":
    unittest.main()
