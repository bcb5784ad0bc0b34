"""
Config chain loading for tsconfig.json / jsconfig.json.

Locates the nearest configuration file for a directory, parses it as JSON5
(comments and trailing commas allowed) and follows ``extends`` references
using node-style file resolution.
"""

import json
import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

import json5

from core.models.config import ConfigFile
from .defaults import CONFIG_SEARCH_PLACES

logger = logging.getLogger(__name__)


def iter_ancestors(start_dir: Union[str, Path]) -> Iterator[Path]:
    """start_dir followed by each parent up to the filesystem root"""
    current = Path(start_dir).absolute()
    yield current
    yield from current.parents


def iter_config_files(
    start_dir: Union[str, Path],
    search_places: Sequence[str] = CONFIG_SEARCH_PLACES
) -> Iterator[Path]:
    """Existing config files from start_dir upwards, search places in order per directory"""
    for directory in iter_ancestors(start_dir):
        for name in search_places:
            candidate = directory / name
            if candidate.is_file():
                yield candidate


def find_config_file(
    start_dir: Union[str, Path],
    search_places: Sequence[str] = CONFIG_SEARCH_PLACES
) -> Optional[Path]:
    """Nearest existing config file"""
    return next(iter_config_files(start_dir, search_places), None)


def load_json5_file(file_path: Union[str, Path]) -> Optional[ConfigFile]:
    """
    Read and parse a JSON5 config file.

    Returns:
        ConfigFile, or None when the file cannot be read or parsed
    """
    file_path = Path(file_path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read config {file_path}: {e}")
        return None

    if not content.strip():
        return ConfigFile(filepath=file_path, is_empty=True, config={})

    try:
        data = json5.loads(content)
    except ValueError as e:
        logger.warning(f"Failed to parse config {file_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Config {file_path} is not an object, ignoring")
        return None

    return ConfigFile(filepath=file_path, config=data)


def _is_path_reference(reference: str) -> bool:
    return reference.startswith(("./", "../", "/")) or reference in (".", "..") or Path(reference).is_absolute()


def _package_main(directory: Path) -> Optional[str]:
    package_file = directory / "package.json"
    if not package_file.is_file():
        return None
    try:
        data = json.loads(package_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring unreadable {package_file}: {e}")
        return None
    main = data.get("main") if isinstance(data, dict) else None
    return main if isinstance(main, str) and main else None


def _resolve_file_or_directory(candidate: Path) -> Optional[Path]:
    """File, file + ``.json``, package.json ``main``, then ``index.json``"""
    if candidate.is_file():
        return candidate

    with_extension = candidate.with_name(candidate.name + ".json")
    if with_extension.is_file():
        return with_extension

    if candidate.is_dir():
        main = _package_main(candidate)
        if main is not None:
            resolved = _resolve_file_or_directory(candidate / main)
            if resolved is not None:
                return resolved

        index_file = candidate / "index.json"
        if index_file.is_file():
            return index_file

    return None


def resolve_extends(reference: str, base_dir: Union[str, Path]) -> Optional[Path]:
    """
    Resolve an ``extends`` reference to a file path.

    Relative and absolute references are resolved against base_dir; bare
    names are looked up in ``node_modules`` of base_dir and its ancestors.
    """
    base_dir = Path(base_dir)

    if _is_path_reference(reference):
        return _resolve_file_or_directory(Path(os.path.abspath(base_dir / reference)))

    for directory in iter_ancestors(base_dir):
        if directory.name == "node_modules":
            continue
        resolved = _resolve_file_or_directory(directory / "node_modules" / reference)
        if resolved is not None:
            return resolved

    return None


class ConfigChainLoader:
    """
    Locate and load configuration files of an extends chain.

    Nothing is cached; every search re-reads from disk.
    """

    def __init__(
        self,
        search_places: Optional[List[str]] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.search_places = list(search_places or CONFIG_SEARCH_PLACES)
        self.logger = logger or globals()["logger"]

    def search(self, start_dir: Union[str, Path]) -> Optional[ConfigFile]:
        """
        Load the nearest non-empty config file above start_dir.

        Returns None when no config exists or the nearest one fails to parse.
        """
        for config_path in iter_config_files(start_dir, self.search_places):
            config = self.load(config_path)
            if config is None or not config.is_empty:
                return config
            self.logger.debug(f"Skipping empty config {config_path}")

        self.logger.debug(f"No {' / '.join(self.search_places)} found above {start_dir}")
        return None

    def load(self, file_path: Union[str, Path]) -> Optional[ConfigFile]:
        config = load_json5_file(file_path)
        if config is not None:
            self.logger.debug(f"Loaded config {config.filepath}")
        return config

    def load_extends(self, config: ConfigFile) -> Optional[ConfigFile]:
        """
        Load the config referenced by config's ``extends`` field.

        Returns None when there is no reference or it cannot be resolved,
        read or parsed.
        """
        reference = config.extends
        if reference is None:
            return None

        resolved = resolve_extends(reference, config.directory)
        if resolved is None:
            self.logger.warning(f"Cannot resolve extends '{reference}' from {config.filepath}")
            return None

        return self.load(resolved)
