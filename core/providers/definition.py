"""Definition provider: import targets and class rule locations."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .base import BaseProvider
from .words import get_words
from ..indexer.classnames import get_position
from ..models.results import Location
from ..parser.base import ParseError
from ..resolver.import_path import gen_import_regexp, is_import_line_match, is_relative_specifier

logger = logging.getLogger(__name__)

# Any identifier: group 1 identifier, group 2 specifier, group 3 extension
ANY_IMPORT_PATTERN = gen_import_regexp(r"(\S+)")


class DefinitionProvider(BaseProvider):
    """
    Go-to-definition for stylesheet imports.

    On an import line the imported file itself is the target (0:0); on
    ``styles.foo`` the target is the rule that defines ``.foo``.
    """

    def provide_definition(
        self,
        text: str,
        file_path: Union[str, Path],
        line: int,
        character: int
    ) -> Optional[Location]:
        current_line = self.get_line(text, line)
        if current_line is None:
            return None

        directory = Path(file_path).parent

        match = ANY_IMPORT_PATTERN.search(current_line)
        if match is not None and is_import_line_match(current_line, match, character):
            return self._import_target(directory, match.group(2))

        words = get_words(current_line, character)
        if words is None:
            return None
        obj, field = words

        stylesheet = self.resolve_stylesheet(text, file_path, obj)
        if stylesheet is None:
            return None

        try:
            position = get_position(stylesheet, field, self.camel_case, self.settings)
        except (ParseError, OSError) as e:
            self.logger.error(f"Failed to index {stylesheet}: {e}")
            return None

        if position is None:
            return None
        return Location(path=stylesheet, line=position.line, column=position.column)

    def _import_target(self, directory: Path, specifier: str) -> Optional[Location]:
        if is_relative_specifier(specifier) or os.path.isabs(specifier):
            target = Path(os.path.abspath(os.path.join(directory, specifier)))
        else:
            target = self.resolver.resolve(directory, specifier)
            if target is None:
                return None
        return Location(path=target, line=0, column=0)
