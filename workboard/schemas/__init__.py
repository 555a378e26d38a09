"""
Pydantic schemas for request/response validation
"""
from workboard.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate, ColumnReorder
from workboard.schemas.task import (
    TaskCreate,
    TaskDifficulty,
    TaskPlacement,
    TaskPriority,
    TaskReorder,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    "ColumnCreate",
    "ColumnResponse",
    "ColumnUpdate",
    "ColumnReorder",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "TaskPlacement",
    "TaskReorder",
    "TaskPriority",
    "TaskDifficulty",
]
