"""
Configuration models for css-modules-context.

Covers the classname transformation setting, parsed tsconfig/jsconfig files,
the effective path-alias configuration assembled from an extends chain, and
global settings with environment variable support.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CamelCaseMode(Enum):
    """How class names are transformed before they become index keys"""
    DISABLED = "disabled"
    FULL = "full"
    DASHES = "dashes"

    @classmethod
    def from_option(cls, value: Union[bool, str, "CamelCaseMode", None]) -> "CamelCaseMode":
        """
        Convert an editor-style option value to a mode.

        Accepts ``False``/``True``/``"dashes"`` (the camelCase initialization
        option), the enum values, and ``"true"``/``"false"`` strings.
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.DISABLED
        if value is True:
            return cls.FULL

        normalized = str(value).strip().lower()
        if normalized in ("true", "full", "1", "yes", "on"):
            return cls.FULL
        if normalized in ("false", "disabled", "0", "no", "off", ""):
            return cls.DISABLED
        if normalized == "dashes":
            return cls.DASHES

        raise ValueError(f"Invalid camelCase option: {value!r}")


class ConfigFile(BaseModel):
    """A single loaded tsconfig.json/jsconfig.json file"""
    model_config = ConfigDict(frozen=True)

    filepath: Path
    is_empty: bool = False
    config: Dict[str, Any] = Field(default_factory=dict)

    @property
    def directory(self) -> Path:
        return self.filepath.parent

    @property
    def compiler_options(self) -> Dict[str, Any]:
        options = self.config.get("compilerOptions")
        return options if isinstance(options, dict) else {}

    @property
    def extends(self) -> Optional[str]:
        """Raw extends reference, if the file declares one"""
        value = self.config.get("extends")
        if isinstance(value, str) and value.strip():
            return value.strip()
        if isinstance(value, list):
            # TypeScript 5 allows a list; the first entry is followed
            for item in value:
                if isinstance(item, str) and item.strip():
                    return item.strip()
        return None


class AliasConfig(BaseModel):
    """
    Effective baseUrl/paths configuration for one resolution.

    base_url and path_mappings may come from different files of an
    extends chain; origin_dir / paths_origin_dir record which.
    """
    model_config = ConfigDict(validate_assignment=True)

    base_url: Optional[Path] = None
    path_mappings: Dict[str, List[str]] = Field(default_factory=dict)
    origin_dir: Optional[Path] = None
    paths_origin_dir: Optional[Path] = None

    @field_validator('path_mappings')
    @classmethod
    def validate_path_mappings(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Patterns may contain at most one wildcard"""
        for pattern in v:
            if pattern.count('*') > 1:
                raise ValueError(f'Path mapping pattern has more than one "*": {pattern}')
        return v

    @property
    def has_base_url(self) -> bool:
        return self.base_url is not None

    @property
    def mapping_base(self) -> Optional[Path]:
        """Directory that path-mapping targets are resolved against"""
        if self.base_url is not None:
            return self.base_url
        return self.paths_origin_dir


class GlobalSettings(BaseSettings):
    """Global application settings with environment variable support"""
    model_config = SettingsConfigDict(
        env_prefix="CSS_MODULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    camel_case: CamelCaseMode = CamelCaseMode.FULL

    # Alias resolution
    config_search_places: List[str] = Field(
        default_factory=lambda: ["tsconfig.json", "jsconfig.json"]
    )
    max_extends_depth: int = Field(default=10, ge=1, le=100)

    # Parsing
    strict_parsing: bool = False
    max_file_size_mb: int = Field(default=10, ge=1, le=100)

    # Logging
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator('camel_case', mode='before')
    @classmethod
    def validate_camel_case(cls, v: Any) -> CamelCaseMode:
        return CamelCaseMode.from_option(v)

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        return str(v).upper()

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
