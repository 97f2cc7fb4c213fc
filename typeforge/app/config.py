"""
TypeForge Configuration.

Central configuration management for the CLI and other hosts. The
extraction engine itself takes plain ExtractionOptions; this module only
decides where those options come from (defaults, JSON file, environment).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from typeforge.extraction.orchestrator import ExtractionOptions


CONFIG_FILENAME = "typeforge_config.json"

ENV_DATA_DIR = "TYPEFORGE_DATA_DIR"
ENV_USE_NAMING_HEURISTICS = "TYPEFORGE_USE_NAMING_HEURISTICS"
ENV_FK_SUFFIX = "TYPEFORGE_FK_SUFFIX"
ENV_PK_NAME = "TYPEFORGE_PK_NAME"
ENV_LOG_LEVEL = "TYPEFORGE_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """A configuration file exists but cannot be used."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


# ============================================================================
# Default Paths
# ============================================================================


def get_default_data_dir() -> Path:
    """Get the default data directory for TypeForge."""
    if env_path := os.environ.get(ENV_DATA_DIR):
        return Path(env_path)
    return Path.home() / ".typeforge"


def get_default_config_path() -> Path:
    return get_default_data_dir() / CONFIG_FILENAME


# ============================================================================
# Configuration Classes
# ============================================================================


@dataclass
class ExtractionConfig:
    """Configuration for relationship inference."""

    use_naming_heuristics: bool = False
    foreign_key_suffix: str = "Id"
    primary_key_name: str = "Id"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractionConfig":
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})

    def to_dict(self) -> dict[str, Any]:
        return {
            "use_naming_heuristics": self.use_naming_heuristics,
            "foreign_key_suffix": self.foreign_key_suffix,
            "primary_key_name": self.primary_key_name,
        }

    def to_options(self) -> ExtractionOptions:
        return ExtractionOptions(
            use_naming_heuristics=self.use_naming_heuristics,
            foreign_key_suffix=self.foreign_key_suffix,
            primary_key_name=self.primary_key_name,
        )


@dataclass
class TypeForgeConfig:
    """Main configuration for TypeForge.

    Aggregates sub-configurations and provides load/save functionality.
    """

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_dir: Path | None = None

    def __post_init__(self):
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "TypeForgeConfig":
        """Load configuration from a JSON file, then apply environment overrides.

        Args:
            config_path: Path to config file. If None, uses default location.

        Returns:
            TypeForgeConfig instance (defaults when the file does not exist)

        Raises:
            ConfigError: If the file exists but is unreadable or malformed
        """
        if config_path is None:
            config_path = get_default_config_path()

        config_path = Path(config_path)

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise ConfigError(f"Cannot read config file {config_path}: {e}", path=config_path) from e
            if not isinstance(data, dict):
                raise ConfigError(f"Config file must hold a JSON object: {config_path}", path=config_path)
            try:
                config = cls.from_dict(data)
            except (TypeError, AttributeError) as e:
                raise ConfigError(f"Invalid config file {config_path}: {e}", path=config_path) from e
            if config.log_level not in _LOG_LEVELS:
                raise ConfigError(f"Unknown log_level {config.log_level!r} in {config_path}", path=config_path)
        else:
            config = cls()

        config.apply_env()
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeForgeConfig":
        """Create config from dictionary."""
        log_dir = data.get("log_dir")
        return cls(
            extraction=ExtractionConfig.from_dict(data.get("extraction", {})),
            log_level=data.get("log_level", "WARNING"),
            log_dir=Path(log_dir) if log_dir else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "extraction": self.extraction.to_dict(),
            "log_level": self.log_level,
            "log_dir": str(self.log_dir) if self.log_dir else None,
        }

    def apply_env(self) -> None:
        """Override fields from TYPEFORGE_* environment variables."""
        if (value := os.environ.get(ENV_USE_NAMING_HEURISTICS)) is not None:
            self.extraction.use_naming_heuristics = value.strip().lower() in _TRUTHY
        if (value := os.environ.get(ENV_FK_SUFFIX)) is not None:
            self.extraction.foreign_key_suffix = value
        if (value := os.environ.get(ENV_PK_NAME)) is not None:
            self.extraction.primary_key_name = value
        if (value := os.environ.get(ENV_LOG_LEVEL)) is not None and value.upper() in _LOG_LEVELS:
            self.log_level = value.upper()

    def save(self, config_path: str | Path | None = None) -> Path:
        """Save configuration to a JSON file.

        Args:
            config_path: Path to save to. If None, uses default location.

        Returns:
            Path to saved file
        """
        if config_path is None:
            config_path = get_default_config_path()

        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

        return config_path


# ============================================================================
# Global Config Instance
# ============================================================================


_global_config: TypeForgeConfig | None = None


def get_config() -> TypeForgeConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = TypeForgeConfig.load()
    return _global_config


def set_config(config: TypeForgeConfig) -> None:
    global _global_config
    _global_config = config


def reload_config(config_path: str | Path | None = None) -> TypeForgeConfig:
    """Reload configuration from disk.

    Args:
        config_path: Optional path to load from

    Returns:
        Newly loaded configuration
    """
    global _global_config
    _global_config = TypeForgeConfig.load(config_path)
    return _global_config
