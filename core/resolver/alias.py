"""
Module alias resolution through tsconfig/jsconfig ``baseUrl`` and ``paths``.

The nearest config file is combined with the files it extends until both
``baseUrl`` and ``paths`` are known, then the specifier is matched against
the path mappings in declared order with a ``baseUrl`` fallback.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional, Pattern, Union

from config.defaults import MAX_EXTENDS_DEPTH
from config.loader import ConfigChainLoader
from ..models.config import AliasConfig, ConfigFile, GlobalSettings

logger = logging.getLogger(__name__)


def is_valid_path_mappings(paths: Any) -> bool:
    """``paths`` must map patterns with at most one ``*`` to non-empty lists of strings"""
    if not isinstance(paths, dict):
        return False

    for pattern, targets in paths.items():
        if pattern.count("*") > 1:
            return False
        if not isinstance(targets, list) or not targets:
            return False
        if not all(isinstance(target, str) for target in targets):
            return False
    return True


def compile_alias_pattern(pattern: str) -> Pattern[str]:
    """Anchored matcher for a path-mapping pattern; group 1 captures the wildcard"""
    if "*" not in pattern:
        return re.compile(f"^{re.escape(pattern)}()$")

    prefix, suffix = pattern.split("*", 1)
    return re.compile(f"^{re.escape(prefix)}(.+){re.escape(suffix)}$", re.DOTALL)


def _absolute(base: Path, relative: str) -> Path:
    return Path(os.path.abspath(os.path.join(base, relative)))


class ModuleAliasResolver:
    """
    Resolve non-relative import specifiers to stylesheet paths.

    Example:
        resolver = ModuleAliasResolver()
        resolver.resolve(Path("/project/src"), "@ui/button.module.css")
    """

    def __init__(
        self,
        loader: Optional[ConfigChainLoader] = None,
        max_depth: int = MAX_EXTENDS_DEPTH,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or globals()["logger"]
        self.loader = loader or ConfigChainLoader(logger=self.logger)
        self.max_depth = max_depth

    @classmethod
    def from_settings(cls, settings: GlobalSettings, logger: Optional[logging.Logger] = None) -> "ModuleAliasResolver":
        """Resolver honouring the configured search places and extends depth"""
        log = logger or globals()["logger"]
        loader = ConfigChainLoader(search_places=settings.config_search_places, logger=log)
        return cls(loader=loader, max_depth=settings.max_extends_depth, logger=log)

    def load_alias_config(self, location_dir: Union[str, Path]) -> Optional[AliasConfig]:
        """
        Assemble the effective alias configuration for a directory.

        Returns None when no config exists, a referenced config cannot be
        loaded, or the extends chain is longer than max_depth.
        """
        current = self.loader.search(location_dir)
        if current is None:
            return None

        alias_config = AliasConfig()
        has_base_url = False
        has_paths = False
        hops = 0

        while True:
            has_base_url = has_base_url or self._apply_base_url(alias_config, current)
            has_paths = has_paths or self._apply_paths(alias_config, current)

            if has_base_url and has_paths:
                break
            if current.extends is None:
                break

            hops += 1
            if hops > self.max_depth:
                self.logger.warning(
                    f"Extends chain from {location_dir} exceeds {self.max_depth} hops, giving up"
                )
                return None

            parent = self.loader.load_extends(current)
            if parent is None:
                return None
            current = parent

        return alias_config

    def _apply_base_url(self, alias_config: AliasConfig, config: ConfigFile) -> bool:
        base_url = config.compiler_options.get("baseUrl")
        if not isinstance(base_url, str):
            return False

        alias_config.base_url = _absolute(config.directory, base_url)
        alias_config.origin_dir = config.directory
        return True

    def _apply_paths(self, alias_config: AliasConfig, config: ConfigFile) -> bool:
        if "paths" not in config.compiler_options:
            return False

        paths = config.compiler_options["paths"]
        if not is_valid_path_mappings(paths):
            self.logger.warning(f"Ignoring invalid compilerOptions.paths in {config.filepath}")
            return False

        alias_config.path_mappings = paths
        alias_config.paths_origin_dir = config.directory
        return True

    def match_path_mappings(self, alias_config: AliasConfig, raw_specifier: str) -> Optional[Path]:
        """First existing candidate of the first matching patterns, in declared order"""
        base = alias_config.mapping_base
        if base is None:
            return None

        for pattern, targets in alias_config.path_mappings.items():
            match = compile_alias_pattern(pattern).match(raw_specifier)
            if match is None:
                continue

            captured = match.group(1)
            for target in targets:
                candidate = _absolute(base, target.replace("*", captured, 1))
                if candidate.exists():
                    return candidate

            self.logger.debug(f"Pattern '{pattern}' matched {raw_specifier} but no candidate exists")

        return None

    def resolve(self, location_dir: Union[str, Path], raw_specifier: str) -> Optional[Path]:
        """
        Resolve a non-relative specifier seen in location_dir.

        Returns:
            Absolute path of an existing file, or None if unresolved
        """
        alias_config = self.load_alias_config(location_dir)
        if alias_config is None:
            self.logger.debug(f"No usable alias config for {location_dir}")
            return None

        resolved = self.match_path_mappings(alias_config, raw_specifier)
        if resolved is None and alias_config.has_base_url:
            candidate = _absolute(alias_config.base_url, raw_specifier)
            if candidate.exists():
                resolved = candidate

        if resolved is None:
            self.logger.debug(f"Unresolved module specifier {raw_specifier} from {location_dir}")
        else:
            self.logger.info(f"Resolved {raw_specifier} -> {resolved}")
        return resolved


def resolve_aliased_import(
    location_dir: Union[str, Path],
    raw_specifier: str,
    logger: Optional[logging.Logger] = None
) -> Optional[Path]:
    return ModuleAliasResolver(logger=logger).resolve(location_dir, raw_specifier)
