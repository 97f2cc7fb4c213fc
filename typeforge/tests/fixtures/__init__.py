"""Fixture modules and schema files for the provider tests."""
