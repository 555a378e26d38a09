"""Schemas for tasks

The wire format uses ``columnId``; Python code uses ``column_id``.
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TaskPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskDifficulty(str, enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class TaskBase(BaseModel):
    column_id: int = Field(..., alias="columnId")
    content: str = Field(..., max_length=255)
    description: Optional[str] = ""
    priority: Optional[str] = None
    difficulty: Optional[str] = None

    class Config:
        populate_by_name = True


class TaskCreate(TaskBase):
    position: Optional[int] = Field(default=None, ge=0)


class TaskUpdate(TaskBase):
    position: Optional[int] = Field(default=None, ge=0)


class TaskResponse(TaskBase):
    id: int
    position: int

    class Config:
        from_attributes = True
        populate_by_name = True


class TaskPlacement(BaseModel):
    id: int
    column_id: int = Field(..., alias="columnId")

    class Config:
        populate_by_name = True


class TaskReorder(BaseModel):
    """Every task in its new global order, with the column it now belongs to."""

    tasks: List[TaskPlacement]

    @field_validator("tasks")
    @classmethod
    def task_ids_are_unique(cls, value: List[TaskPlacement]) -> List[TaskPlacement]:
        ids = [placement.id for placement in value]
        if len(set(ids)) != len(ids):
            raise ValueError("task ids must be unique")
        return value
