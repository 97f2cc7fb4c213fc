"""TypeForge core data models."""
