"""WorkBoard Database Models"""
from workboard.models.column import Column
from workboard.models.task import Task

__all__ = [
    "Column",
    "Task",
]
