"""
Selector helpers for the classname indexer.

Pure functions: comma splitting, whitespace/escape normalization, class
token matching and ``&`` nesting substitution.
"""

import re
from typing import List, Optional, Sequence

NESTING_PLACEHOLDER = "&"

# Emoji with default emoji presentation (Unicode Emoji_Presentation, by block)
EMOJI_PRESENTATION = (
    "⌚⌛⏩-⏬⏰⏳◽◾☔☕"
    "♈-♓♿⚓⚡⚪⚫⚽⚾⛄⛅"
    "⛎⛔⛪⛲⛳⛵⛺⛽✅✊✋"
    "✨❌❎❓-❕❗➕-➗➰➿"
    "⬛⬜⭐⭕"
    "\U0001f004\U0001f0cf\U0001f18e\U0001f191-\U0001f19a\U0001f1e6-\U0001f1ff"
    "\U0001f201\U0001f21a\U0001f22f\U0001f232-\U0001f236\U0001f238-\U0001f23a"
    "\U0001f250\U0001f251\U0001f300-\U0001f320\U0001f32d-\U0001f335"
    "\U0001f337-\U0001f37c\U0001f37e-\U0001f393\U0001f3a0-\U0001f3ca"
    "\U0001f3cf-\U0001f3d3\U0001f3e0-\U0001f3f0\U0001f3f4\U0001f3f8-\U0001f43e"
    "\U0001f440\U0001f442-\U0001f4fc\U0001f4ff-\U0001f53d\U0001f54b-\U0001f54e"
    "\U0001f550-\U0001f567\U0001f57a\U0001f595\U0001f596\U0001f5a4"
    "\U0001f5fb-\U0001f64f\U0001f680-\U0001f6c5\U0001f6cc\U0001f6d0-\U0001f6d2"
    "\U0001f6d5-\U0001f6d7\U0001f6dc-\U0001f6df\U0001f6eb\U0001f6ec"
    "\U0001f6f4-\U0001f6fc\U0001f7e0-\U0001f7eb\U0001f7f0\U0001f90c-\U0001f93a"
    "\U0001f93c-\U0001f945\U0001f947-\U0001f9ff\U0001fa70-\U0001faff"
)

CLASS_NAME_PATTERN = re.compile(r"\.[-0-9a-z_" + EMOJI_PRESENTATION + r"]+", re.IGNORECASE)

ESCAPED_WHITESPACE_PATTERN = re.compile(r"\\n|\\t")
WHITESPACE_PATTERN = re.compile(r"\s+")


def sanitize_selector(selector: str) -> str:
    """Drop escaped ``\\n``/``\\t`` sequences, collapse whitespace, trim"""
    selector = ESCAPED_WHITESPACE_PATTERN.sub("", selector)
    return WHITESPACE_PATTERN.sub(" ", selector).strip()


def split_selectors(selector: str) -> List[str]:
    """Split a raw rule selector on commas into sanitized selector strings"""
    return [sanitize_selector(part) for part in selector.split(",")]


def find_class_names(selector: str) -> List[str]:
    """All class tokens (with leading ``.``) in a selector, in order"""
    return CLASS_NAME_PATTERN.findall(selector)


def substitute_nesting(parent_selector: str, selector: str) -> str:
    """Replace the first ``&`` in selector with the parent selector text"""
    return selector.replace(NESTING_PLACEHOLDER, parent_selector, 1)


def concat_selectors(
    parent_selectors: Optional[Sequence[str]],
    selectors: Sequence[str]
) -> List[str]:
    """
    Combine every parent selector with every nested selector.

    Selectors without ``&`` are kept as they are, once per parent selector.
    With no parent selectors (parent is an at-rule or unknown) the nested
    selectors pass through unchanged.
    """
    if not parent_selectors:
        return list(selectors)

    return [
        substitute_nesting(parent, selector)
        for parent in parent_selectors
        for selector in selectors
    ]
