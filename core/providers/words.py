"""Caret word extraction for ``styles.foo`` and ``styles['foo-bar']``."""

import re
from typing import Optional, Tuple

MEMBER_TAIL_PATTERN = re.compile(r"[a-z0-9._]*$", re.IGNORECASE)
MEMBER_PATTERN = re.compile(r"^([a-z0-9._]*)", re.IGNORECASE)
SUBSCRIPT_TAIL_PATTERN = re.compile(r"[a-z0-9\"'_\[\-]*$", re.IGNORECASE)
SUBSCRIPT_PATTERN = re.compile(r"^([a-z0-9_\-\['\"]*)", re.IGNORECASE)


def get_words(line: str, character: int) -> Optional[Tuple[str, str]]:
    """
    Object and field under the caret.

    ``styles.foo`` -> ("styles", "foo"); ``styles['foo-bar']`` ->
    ("styles", "foo-bar"). Returns None when the caret is on neither form.
    """
    head = line[:character]

    start = MEMBER_TAIL_PATTERN.search(head).start()
    if "." in head[start:]:
        parts = MEMBER_PATTERN.match(line[start:]).group(1).split(".")
        return parts[0], parts[1]

    start = SUBSCRIPT_TAIL_PATTERN.search(head).start()
    if "[" not in head[start:]:
        return None

    expression = SUBSCRIPT_PATTERN.match(line[start:]).group(1)
    obj, subscript = expression.split("[")[:2]
    # drop the wrapping quotes
    return obj, subscript[1:-1]


def get_member_prefix(line: str, character: int) -> str:
    """Dotted expression ending at the caret, e.g. ``styles.fo``"""
    head = line[:character]
    return head[MEMBER_TAIL_PATTERN.search(head).start():]
