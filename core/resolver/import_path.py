"""
Import path extraction.

Finds the stylesheet specifier a local identifier is bound to, via
``import styles from "./a.css"`` or ``const styles = require("./a.css")``,
and turns it into an absolute path.
"""

import logging
import os
import re
from pathlib import Path
from typing import Match, Optional, Pattern, Union

from config.defaults import STYLESHEET_EXTENSIONS
from .alias import ModuleAliasResolver

logger = logging.getLogger(__name__)

STYLESHEET_FILE_PATTERN = r"(.+\.(" + "|".join(ext.lstrip(".") for ext in STYLESHEET_EXTENSIONS) + "))"
FROM_OR_REQUIRE_PATTERN = r"(?:from\s+|=\s+require(?:<any>)?\()"


def gen_import_regexp(import_name: str) -> Pattern[str]:
    """
    Import/require matcher for an identifier pattern.

    Group 1 is the quoted specifier, group 2 its stylesheet extension.
    import_name is used as a regex fragment; escape literal identifiers.
    """
    return re.compile(
        rf"\b{import_name}\s+{FROM_OR_REQUIRE_PATTERN}[\"']{STYLESHEET_FILE_PATTERN}[\"']\)?"
    )


def find_raw_specifier(file_text: str, identifier: str) -> Optional[str]:
    """Quoted stylesheet specifier bound to identifier, or None"""
    match = gen_import_regexp(re.escape(identifier)).search(file_text)
    if match is None:
        return None
    return match.group(1)


def is_relative_specifier(specifier: str) -> bool:
    return specifier.startswith(("./", "../"))


def is_import_line_match(line: str, match: Optional[Match[str]], character: int) -> bool:
    """Whether the caret sits strictly inside the text of match group 1 or 2 on line"""
    if match is None:
        return False

    for group in (2, 1):
        text = match.group(group)
        start = line.find(text) + 1
        if start < character < start + len(text):
            return True
    return False


def resolve_import(
    file_text: str,
    identifier: str,
    directory: Union[str, Path],
    resolver: Optional[ModuleAliasResolver] = None,
    logger: Optional[logging.Logger] = None
) -> Optional[Path]:
    """
    Absolute path of the stylesheet identifier is imported from.

    Relative specifiers are joined onto directory; anything else goes
    through the module alias resolver. Returns None when unresolved.
    """
    log = logger or globals()["logger"]

    specifier = find_raw_specifier(file_text, identifier)
    if specifier is None:
        log.debug(f"No stylesheet import bound to '{identifier}'")
        return None

    if is_relative_specifier(specifier):
        return Path(os.path.abspath(os.path.join(directory, specifier)))

    resolver = resolver or ModuleAliasResolver(logger=log)
    return resolver.resolve(directory, specifier)
