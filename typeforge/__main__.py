"""
Entry point for running TypeForge as a module.

Usage:
    python -m typeforge module ./models.py
    python -m typeforge --help
"""

from typeforge.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
