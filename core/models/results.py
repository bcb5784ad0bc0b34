"""
Consumer-facing result models for hover, definition and completion.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class HoverResult(BaseModel):
    """Hover content: a code block in the given language"""
    model_config = ConfigDict(frozen=True)

    language: str = "css"
    value: str


class Location(BaseModel):
    """Definition target; line is 0-based, column is the rule's indexed column"""
    model_config = ConfigDict(frozen=True)

    path: Path
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)


class CompletionItem(BaseModel):
    """Completion candidate; sort_index is 1-based in index order"""
    model_config = ConfigDict(frozen=True)

    label: str
    sort_index: int = Field(ge=1)
