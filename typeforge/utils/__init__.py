"""
TypeForge Utils - Helper functions and utilities.
"""

from typeforge.utils.logging import setup_logging, get_logger, log_error, log_operation

__all__ = [
    "setup_logging",
    "get_logger",
    "log_error",
    "log_operation",
]
