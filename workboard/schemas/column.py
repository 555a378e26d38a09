"""Schemas for board columns"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ColumnBase(BaseModel):
    title: str = Field(..., max_length=255)
    position: Optional[int] = Field(default=None, ge=0)


class ColumnCreate(ColumnBase):
    pass


class ColumnUpdate(ColumnBase):
    pass


class ColumnResponse(BaseModel):
    id: int
    title: str
    position: int

    class Config:
        from_attributes = True


class ColumnReorder(BaseModel):
    """Column ids in their new left-to-right order."""

    ids: List[int]

    @field_validator("ids")
    @classmethod
    def ids_are_unique(cls, value: List[int]) -> List[int]:
        if len(set(value)) != len(value):
            raise ValueError("column ids must be unique")
        return value
