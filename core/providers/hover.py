"""Hover provider: rule snippet for ``styles.foo`` under the caret."""

import logging
from pathlib import Path
from typing import Optional, Union

from .base import BaseProvider
from .words import get_words
from ..indexer.classnames import build_index, lookup
from ..indexer.formatting import get_eol, stringify_classname
from ..models.results import HoverResult
from ..parser.base import ParseError

logger = logging.getLogger(__name__)


class HoverProvider(BaseProvider):
    """Render the defining rule of the class under the caret"""

    def provide_hover(
        self,
        text: str,
        file_path: Union[str, Path],
        line: int,
        character: int
    ) -> Optional[HoverResult]:
        current_line = self.get_line(text, line)
        if current_line is None:
            return None

        words = get_words(current_line, character)
        if words is None:
            return None
        obj, field = words

        stylesheet = self.resolve_stylesheet(text, file_path, obj)
        if stylesheet is None:
            return None

        try:
            index = build_index(stylesheet, self.transformer, self.settings, logger=self.logger)
        except (ParseError, OSError) as e:
            self.logger.error(f"Failed to index {stylesheet}: {e}")
            return None

        entry = lookup(index, field)
        if entry is None:
            return None

        value = stringify_classname(field, entry.declarations, entry.comments, get_eol(text))
        return HoverResult(language="css", value=value)
