"""Version 1 routes, mounted at the application root."""
from fastapi import APIRouter

from workboard.api.v1 import columns, tasks

api_router = APIRouter()
api_router.include_router(columns.router, prefix="/columns", tags=["columns"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])

__all__ = ["api_router"]
