"""
Consumer adapters: hover, definition and completion over document text.

Editor protocol plumbing (document sync, trigger characters, text edits)
is left to the host.
"""

from .base import BaseProvider
from .completion import CompletionProvider
from .definition import DefinitionProvider
from .hover import HoverProvider
from .words import get_words

__all__ = [
    "BaseProvider",
    "CompletionProvider",
    "DefinitionProvider",
    "HoverProvider",
    "get_words",
]
