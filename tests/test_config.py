"""
Unit tests for configuration models.

Tests camelCase option parsing, loaded config files, alias configuration
validation and global settings with environment overrides.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config.defaults import DEFAULT_SETTINGS, ENV_VAR_MAPPING
from core.models.config import AliasConfig, CamelCaseMode, ConfigFile, GlobalSettings


class TestCamelCaseMode:
    """Test CamelCaseMode option parsing"""

    @pytest.mark.parametrize("value,expected", [
        (True, CamelCaseMode.FULL),
        (False, CamelCaseMode.DISABLED),
        (None, CamelCaseMode.DISABLED),
        ("dashes", CamelCaseMode.DASHES),
        ("DASHES", CamelCaseMode.DASHES),
        ("true", CamelCaseMode.FULL),
        ("false", CamelCaseMode.DISABLED),
        ("full", CamelCaseMode.FULL),
        ("disabled", CamelCaseMode.DISABLED),
        (CamelCaseMode.DASHES, CamelCaseMode.DASHES),
    ])
    def test_from_option(self, value, expected):
        assert CamelCaseMode.from_option(value) == expected

    def test_invalid_option(self):
        with pytest.raises(ValueError):
            CamelCaseMode.from_option("snake")


class TestConfigFile:
    """Test ConfigFile accessors"""

    def test_compiler_options(self):
        config = ConfigFile(
            filepath=Path("/p/tsconfig.json"),
            config={"compilerOptions": {"baseUrl": "./src"}},
        )

        assert config.directory == Path("/p")
        assert config.compiler_options == {"baseUrl": "./src"}

    def test_compiler_options_not_a_dict(self):
        config = ConfigFile(filepath=Path("/p/tsconfig.json"), config={"compilerOptions": []})

        assert config.compiler_options == {}

    def test_extends_string(self):
        config = ConfigFile(filepath=Path("/p/tsconfig.json"), config={"extends": " ./base.json "})

        assert config.extends == "./base.json"

    def test_extends_list_uses_first_string(self):
        config = ConfigFile(
            filepath=Path("/p/tsconfig.json"),
            config={"extends": [1, "", "./a.json", "./b.json"]},
        )

        assert config.extends == "./a.json"

    def test_extends_missing(self):
        assert ConfigFile(filepath=Path("/p/tsconfig.json")).extends is None


class TestAliasConfig:
    """Test AliasConfig model"""

    def test_defaults(self):
        config = AliasConfig()

        assert config.base_url is None
        assert config.path_mappings == {}
        assert not config.has_base_url
        assert config.mapping_base is None

    def test_mapping_base_prefers_base_url(self):
        config = AliasConfig(
            base_url=Path("/p/src"),
            path_mappings={"@/*": ["./*"]},
            origin_dir=Path("/p"),
            paths_origin_dir=Path("/q"),
        )

        assert config.has_base_url
        assert config.mapping_base == Path("/p/src")

    def test_mapping_base_falls_back_to_paths_origin(self):
        config = AliasConfig(path_mappings={"@/*": ["./*"]}, paths_origin_dir=Path("/q"))

        assert config.mapping_base == Path("/q")

    def test_rejects_multiple_wildcards(self):
        with pytest.raises(ValidationError):
            AliasConfig(path_mappings={"@/*/*": ["./*"]})


class TestGlobalSettings:
    """Test GlobalSettings defaults and environment overrides"""

    def test_defaults_match_default_settings(self, monkeypatch):
        for env_var in ENV_VAR_MAPPING:
            monkeypatch.delenv(env_var, raising=False)

        settings = GlobalSettings(_env_file=None)

        assert settings.camel_case == CamelCaseMode.from_option(DEFAULT_SETTINGS["camel_case"])
        assert settings.config_search_places == DEFAULT_SETTINGS["config_search_places"]
        assert settings.max_extends_depth == DEFAULT_SETTINGS["max_extends_depth"]
        assert settings.strict_parsing == DEFAULT_SETTINGS["strict_parsing"]
        assert settings.max_file_size_mb == DEFAULT_SETTINGS["max_file_size_mb"]
        assert settings.log_level == DEFAULT_SETTINGS["log_level"]

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CSS_MODULES_CAMEL_CASE", "dashes")
        monkeypatch.setenv("CSS_MODULES_MAX_EXTENDS_DEPTH", "3")
        monkeypatch.setenv("CSS_MODULES_LOG_LEVEL", "debug")

        settings = GlobalSettings(_env_file=None)

        assert settings.camel_case == CamelCaseMode.DASHES
        assert settings.max_extends_depth == 3
        assert settings.log_level == "DEBUG"

    def test_env_var_mapping_covers_fields(self):
        assert set(ENV_VAR_MAPPING.values()) == set(GlobalSettings.model_fields)

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            GlobalSettings(_env_file=None, log_level="verbose")

    def test_max_file_size_bytes(self):
        assert GlobalSettings(_env_file=None, max_file_size_mb=2).max_file_size_bytes == 2 * 1024 * 1024
