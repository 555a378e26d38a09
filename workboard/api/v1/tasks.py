"""Task endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from workboard.database import get_db
from workboard.errors import storage_guard
from workboard.models import Task
from workboard.schemas import TaskCreate, TaskReorder, TaskResponse, TaskUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


def _ordered_tasks(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.position.asc(), Task.id.asc()).all()


@router.get("", response_model=List[TaskResponse])
def list_tasks(db: Session = Depends(get_db)):
    """List every task in board order.

    Positions form one sequence across all columns; filtering the result by
    ``columnId`` gives each column's display order.
    """
    with storage_guard(db, "list tasks"):
        return _ordered_tasks(db)


@router.post("", response_model=TaskResponse)
def create_task(task_in: TaskCreate, db: Session = Depends(get_db)):
    with storage_guard(db, "create task"):
        position = task_in.position
        if position is None:
            position = db.query(Task).count()
        task = Task(
            column_id=task_in.column_id,
            content=task_in.content,
            description=task_in.description,
            priority=task_in.priority,
            difficulty=task_in.difficulty,
            position=position,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
    logger.info("Created task %s in column %s", task.id, task.column_id)
    return task


@router.put("/reorder", response_model=List[TaskResponse])
def reorder_tasks(reorder_in: TaskReorder, db: Session = Depends(get_db)):
    """Apply a whole drag result at once.

    Each listed task gets ``position = index`` and the listed column. Unknown
    ids are skipped. Sending the same body twice leaves the same rows.
    """
    ids = [placement.id for placement in reorder_in.tasks]
    with storage_guard(db, "reorder tasks"):
        tasks = {task.id: task for task in db.query(Task).filter(Task.id.in_(ids)).all()}
        for index, placement in enumerate(reorder_in.tasks):
            task = tasks.get(placement.id)
            if task is None:
                logger.warning("Reorder skipped unknown task %s", placement.id)
                continue
            if task.column_id != placement.column_id:
                logger.info(
                    "Task %s moved from column %s to %s", task.id, task.column_id, placement.column_id
                )
            task.column_id = placement.column_id
            task.position = index
        db.commit()
        return _ordered_tasks(db)


@router.put("/{task_id}", response_model=Optional[TaskResponse])
def update_task(task_id: int, task_in: TaskUpdate, db: Session = Depends(get_db)):
    """Overwrite a task's fields; ``null`` when it does not exist."""
    with storage_guard(db, "update task"):
        task = db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            return None

        update_data = task_in.model_dump(exclude={"position"})
        for field, value in update_data.items():
            setattr(task, field, value)
        if task_in.position is not None:
            task.position = task_in.position

        db.commit()
        db.refresh(task)
        return task


@router.delete("/{task_id}", response_model=Optional[TaskResponse])
def delete_task(task_id: int, db: Session = Depends(get_db)):
    with storage_guard(db, "delete task"):
        task = db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            return None
        deleted = TaskResponse.model_validate(task)
        db.delete(task)
        db.commit()
    logger.info("Deleted task %s", task_id)
    return deleted
