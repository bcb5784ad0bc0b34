"""
Classname index models.

A ClassnameIndex maps a (transformed) class selector such as ``.fooBar`` to
the declarations, leading comments and source position of the rule that
first defined it.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Line/column pair of a classname definition"""
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)


class ClassnameEntry(BaseModel):
    """Definition metadata of a single class selector"""
    model_config = ConfigDict(validate_assignment=True)

    declarations: List[str] = Field(default_factory=list)  # "prop: value;"
    comments: List[str] = Field(default_factory=list)
    position: Position


ClassnameIndex = Dict[str, ClassnameEntry]
