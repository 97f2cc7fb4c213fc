"""
Test Suite: App Configuration

Tests for TypeForgeConfig loading, saving and environment overrides.
"""

import json

import pytest

from typeforge.app import config as config_module
from typeforge.app.config import ConfigError, ExtractionConfig, TypeForgeConfig
from typeforge.extraction import ExtractionOptions


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        config_module.ENV_USE_NAMING_HEURISTICS,
        config_module.ENV_FK_SUFFIX,
        config_module.ENV_PK_NAME,
        config_module.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(config_module.ENV_DATA_DIR, str(tmp_path / "data"))
    config_module.set_config(None)


def test_defaults():
    config = TypeForgeConfig()

    assert config.extraction.to_options() == ExtractionOptions()
    assert config.log_level == "WARNING"
    assert config.log_dir is None


def test_load_missing_file_returns_defaults(tmp_path):
    config = TypeForgeConfig.load(tmp_path / "nope.json")

    assert config.to_dict() == TypeForgeConfig().to_dict()


def test_save_and_load_round_trip(tmp_path):
    config = TypeForgeConfig(
        extraction=ExtractionConfig(use_naming_heuristics=True, foreign_key_suffix="Ref"),
        log_level="DEBUG",
        log_dir=str(tmp_path / "logs"),
    )

    path = config.save(tmp_path / "cfg" / "typeforge_config.json")
    loaded = TypeForgeConfig.load(path)

    assert loaded.extraction.use_naming_heuristics is True
    assert loaded.extraction.foreign_key_suffix == "Ref"
    assert loaded.log_level == "DEBUG"
    assert loaded.log_dir == tmp_path / "logs"


def test_save_uses_data_dir_by_default(tmp_path):
    path = TypeForgeConfig().save()

    assert path == tmp_path / "data" / config_module.CONFIG_FILENAME
    assert json.loads(path.read_text(encoding="utf-8"))["extraction"]["foreign_key_suffix"] == "Id"


def test_environment_overrides(monkeypatch, tmp_path):
    path = TypeForgeConfig().save(tmp_path / "cfg.json")
    monkeypatch.setenv(config_module.ENV_USE_NAMING_HEURISTICS, "yes")
    monkeypatch.setenv(config_module.ENV_FK_SUFFIX, "_id")
    monkeypatch.setenv(config_module.ENV_PK_NAME, "Key")
    monkeypatch.setenv(config_module.ENV_LOG_LEVEL, "info")

    config = TypeForgeConfig.load(path)

    assert config.extraction.to_options() == ExtractionOptions(
        use_naming_heuristics=True,
        foreign_key_suffix="_id",
        primary_key_name="Key",
    )
    assert config.log_level == "INFO"


def test_invalid_log_level_env_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv(config_module.ENV_LOG_LEVEL, "LOUD")

    assert TypeForgeConfig.load(tmp_path / "nope.json").log_level == "WARNING"


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        '{"extraction": "on"}',
        '{"extraction": {"unknown_option": 1, "use_naming_heuristics": true}, "log_level": "LOUD"}',
    ],
)
def test_malformed_config_file_raises_config_error(tmp_path, content):
    path = tmp_path / "cfg.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        TypeForgeConfig.load(path)

    assert excinfo.value.path == path


def test_config_path_is_directory(tmp_path):
    with pytest.raises(ConfigError):
        TypeForgeConfig.load(tmp_path)


def test_global_config_helpers(tmp_path):
    path = TypeForgeConfig(log_level="ERROR").save(tmp_path / "cfg.json")

    assert config_module.reload_config(path).log_level == "ERROR"
    assert config_module.get_config().log_level == "ERROR"

    config_module.set_config(TypeForgeConfig(log_level="DEBUG"))
    assert config_module.get_config().log_level == "DEBUG"
