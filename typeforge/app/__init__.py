"""
App - configuration for TypeForge hosts.
"""

from typeforge.app.config import (
    ConfigError,
    ExtractionConfig,
    TypeForgeConfig,
    get_config,
    reload_config,
    set_config,
)

__all__ = [
    "ConfigError",
    "ExtractionConfig",
    "TypeForgeConfig",
    "get_config",
    "reload_config",
    "set_config",
]
