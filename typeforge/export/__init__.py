"""
Export - hand extraction results to downstream consumers.
"""

from typeforge.export.export_service import ExportService

__all__ = ["ExportService"]
