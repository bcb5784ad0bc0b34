"""Display helpers for classname index entries."""

from typing import List


def get_eol(text: str) -> str:
    """First line terminator found in text; ``\\n`` when there is none"""
    for index, char in enumerate(text):
        if char == "\r":
            return "\r\n" if text[index + 1:index + 2] == "\n" else "\r"
        if char == "\n":
            return "\n"
    return "\n"


def _format_comment(comment: str, eol: str) -> str:
    lines = comment.split(eol)
    if len(lines) < 2:
        return f"/*{comment} */"

    body = [f" {line.lstrip()}" for line in lines[1:]]
    return eol.join([f"/*{lines[0]}", *body, " */"])


def stringify_classname(
    class_name: str,
    declarations: List[str],
    comments: List[str],
    eol: str = "\n"
) -> str:
    """
    Render an index entry as a CSS snippet for hover content.

    Args:
        class_name: Class name without the leading dot
        declarations: ``prop: value;`` strings of the defining rule
        comments: Comment bodies preceding the rule
        eol: Line terminator of the source document

    Returns:
        Comments followed by the rule, e.g. ``.foo {\\n  color: red;\\n}``
    """
    comment_block = ""
    if comments:
        comment_block = eol.join(_format_comment(comment, eol) for comment in comments) + eol

    if not declarations:
        return f"{comment_block}.{class_name} {{}}"

    lines = [f".{class_name} {{", *(f"  {declaration}" for declaration in declarations), "}"]
    return comment_block + eol.join(lines)
