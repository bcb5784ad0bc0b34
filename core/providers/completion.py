"""Completion provider: class names of the stylesheet bound to ``styles.``"""

import logging
from pathlib import Path
from typing import List, Union

from .base import BaseProvider
from .words import get_member_prefix
from ..indexer.classnames import get_all_class_names
from ..models.results import CompletionItem
from ..parser.base import ParseError

logger = logging.getLogger(__name__)


class CompletionProvider(BaseProvider):
    """
    Complete ``styles.<partial>`` with indexed class names.

    Names are offered in index order, filtered to those containing the
    partial field.
    """

    def provide_completion(
        self,
        text: str,
        file_path: Union[str, Path],
        line: int,
        character: int
    ) -> List[CompletionItem]:
        current_line = self.get_line(text, line)
        if current_line is None:
            return []

        prefix = get_member_prefix(current_line, character)
        if "." not in prefix:
            return []
        obj, field = prefix.split(".")[:2]

        stylesheet = self.resolve_stylesheet(text, file_path, obj)
        if stylesheet is None:
            return []

        try:
            class_names = get_all_class_names(stylesheet, field, self.transformer, self.settings)
        except (ParseError, OSError) as e:
            self.logger.error(f"Failed to index {stylesheet}: {e}")
            return []

        return [
            CompletionItem(label=name, sort_index=position)
            for position, name in enumerate(class_names, start=1)
        ]
