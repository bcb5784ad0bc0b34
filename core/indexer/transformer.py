"""
Classname transformers.

The same transformer is applied to every indexed class name and to the
identifier a consumer looks up, so ``styles.fooBar`` can find ``.foo-bar``.
"""

import re
from typing import Callable, List, Union

from ..models.config import CamelCaseMode

StringTransformer = Callable[[str], str]

# Word separators: whitespace and ASCII punctuation (covers "-", "_", ".")
SEPARATOR_PATTERN = re.compile(r"[\s!-/:-@\[-`{-~]+")

# Words inside a separator-free chunk: acronyms, capitalized/lower words,
# digit runs, and any run of other symbols (emoji etc.)
WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+|[^A-Za-z0-9]+")

DASHES_PATTERN = re.compile(r"-+([A-Za-z0-9_])")


def identity(name: str) -> str:
    return name


def split_words(text: str) -> List[str]:
    words = []
    for chunk in SEPARATOR_PATTERN.split(text):
        if chunk:
            words.extend(WORD_PATTERN.findall(chunk))
    return words


def camel_case(name: str) -> str:
    """
    Camel-case a class name, keeping a leading ``.``.

    ``.el__block--mod`` -> ``.elBlockMod``
    """
    prefix = "." if name.startswith(".") else ""
    words = split_words(name)
    if not words:
        return prefix

    head, *tail = words
    return prefix + head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def camel_case_dashes(name: str) -> str:
    """
    Camel-case dashes only: ``.el__block--mod`` -> ``.el__blockMod``

    Underscores and existing case are left alone.
    """
    return DASHES_PATTERN.sub(lambda match: match.group(1).upper(), name)


_TRANSFORMERS = {
    CamelCaseMode.DISABLED: identity,
    CamelCaseMode.FULL: camel_case,
    CamelCaseMode.DASHES: camel_case_dashes,
}


def get_transformer(mode: Union[CamelCaseMode, bool, str, None]) -> StringTransformer:
    """Transformer for a camelCase setting (mode or editor-style option value)"""
    return _TRANSFORMERS[CamelCaseMode.from_option(mode)]
