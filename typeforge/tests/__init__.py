"""
TypeForge Test Suite

Test Modules:
- test_core.py: descriptor, entity and relationship models
- test_extraction.py: collector, relationship rules, orchestrator
- test_providers.py: module, namespace and schema-file providers
- test_export.py: JSON and NetworkX export
- test_app.py: configuration
- test_cli.py: command line interface

Run all tests:
    pytest typeforge/tests/ -v
"""
