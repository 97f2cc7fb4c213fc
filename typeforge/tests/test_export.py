"""
Test Suite: Export

Tests for the JSON and NetworkX exports.
"""

import json

import pytest

from typeforge.export import ExportService
from typeforge.extraction import extract


@pytest.fixture
def result():
    return extract(
        [
            {"kind": "enum", "name": "Status", "memberNames": ["Active", "Closed"]},
            {"kind": "class", "name": "Account"},
            {
                "kind": "class",
                "name": "SavingsAccount",
                "baseTypeName": "Account",
                "properties": [
                    {"name": "AccountId", "declaredTypeName": "int"},
                    {"name": "State", "declaredTypeName": "Status", "isEnum": True},
                ],
            },
            {"kind": "class", "name": "Circle", "baseTypeName": "Shape"},
        ],
        use_naming_heuristics=True,
    )


def test_to_dict(result):
    data = ExportService().to_dict(result)

    assert data["entity_count"] == 4
    assert data["relationship_count"] == 4
    assert data["entities"][0] == {
        "name": "Status",
        "kind": "enum",
        "attributes": {"Values": ["Active", "Closed"]},
    }
    assert data["relationships"][0] == {
        "from_entity": "SavingsAccount",
        "to_entity": "Account",
        "key": "references",
    }


def test_export_json_writes_file(result, tmp_path):
    output = ExportService().export_json(result, tmp_path / "out" / "graph.json")

    data = json.loads(output.read_text(encoding="utf-8"))
    assert "export_timestamp" in data
    assert [e["name"] for e in data["entities"]] == ["Status", "Account", "SavingsAccount", "Circle"]
    assert [r["key"] for r in data["relationships"]] == ["references", "enum", "inherits", "inherits"]


def test_to_json_is_parseable(result):
    data = json.loads(ExportService().to_json(result))

    assert data["format_version"] == "1.0"


def test_to_networkx_keeps_parallel_edges(result):
    graph = ExportService().to_networkx(result)

    # references + inherits between Account and SavingsAccount, in both directions
    assert graph.number_of_edges("SavingsAccount", "Account") == 1
    assert graph.number_of_edges("Account", "SavingsAccount") == 1
    assert graph.number_of_edges() == 4

    assert graph.nodes["Status"]["kind"] == "enum"
    assert graph.nodes["Status"]["external"] is False
    assert graph.nodes["Shape"]["external"] is True

    relations = sorted(data["relation"] for _, _, data in graph.edges(data=True))
    assert relations == ["enum", "inherits", "inherits", "references"]


def test_to_networkx_duplicate_triples():
    duplicated = extract(
        [
            {"name": "Account"},
            {
                "name": "Ledger",
                "properties": [
                    {"name": "AccountId", "declaredTypeName": "int"},
                    {"name": "AccountId", "declaredTypeName": "string"},
                ],
            },
        ],
        use_naming_heuristics=True,
    )

    graph = ExportService().to_networkx(duplicated)

    assert graph.number_of_edges("Ledger", "Account") == 2
