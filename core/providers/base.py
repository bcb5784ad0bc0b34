"""
Shared plumbing for the hover, definition and completion providers.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..indexer.formatting import get_eol
from ..indexer.transformer import StringTransformer, get_transformer
from ..models.config import CamelCaseMode, GlobalSettings
from ..resolver.alias import ModuleAliasResolver
from ..resolver.import_path import resolve_import

logger = logging.getLogger(__name__)

CamelCaseOption = Union[CamelCaseMode, bool, str]


class BaseProvider:
    """
    Base class for providers working on an open document's text.

    Subclasses turn a caret position into a result; any failure to build a
    stylesheet index degrades to an empty result.
    """

    def __init__(
        self,
        camel_case: CamelCaseOption = CamelCaseMode.FULL,
        resolver: Optional[ModuleAliasResolver] = None,
        settings: Optional[GlobalSettings] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or globals()["logger"]
        self.settings = settings or GlobalSettings()
        self.resolver = resolver or ModuleAliasResolver.from_settings(self.settings, logger=self.logger)
        self.update_settings(camel_case)

    def update_settings(self, camel_case: CamelCaseOption) -> None:
        self.camel_case = CamelCaseMode.from_option(camel_case)
        self.transformer: StringTransformer = get_transformer(self.camel_case)

    @staticmethod
    def get_line(text: str, line: int) -> Optional[str]:
        lines: List[str] = text.split(get_eol(text))
        if 0 <= line < len(lines):
            return lines[line]
        return None

    def resolve_stylesheet(self, text: str, file_path: Union[str, Path], identifier: str) -> Optional[Path]:
        """Stylesheet imported as identifier by the document at file_path"""
        directory = Path(file_path).parent
        return resolve_import(text, identifier, directory, resolver=self.resolver, logger=self.logger)
