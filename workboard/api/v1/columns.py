"""Column endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from workboard.database import get_db
from workboard.errors import storage_guard
from workboard.models import Column
from workboard.schemas import ColumnCreate, ColumnReorder, ColumnResponse, ColumnUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


def _ordered_columns(db: Session) -> List[Column]:
    return db.query(Column).order_by(Column.position.asc(), Column.id.asc()).all()


@router.get("", response_model=List[ColumnResponse])
def list_columns(db: Session = Depends(get_db)):
    """List every column, left to right."""
    with storage_guard(db, "list columns"):
        return _ordered_columns(db)


@router.post("", response_model=ColumnResponse)
def create_column(column_in: ColumnCreate, db: Session = Depends(get_db)):
    with storage_guard(db, "create column"):
        position = column_in.position
        if position is None:
            position = db.query(Column).count()
        column = Column(title=column_in.title, position=position)
        db.add(column)
        db.commit()
        db.refresh(column)
    logger.info("Created column %s at position %s", column.id, column.position)
    return column


@router.put("/reorder", response_model=List[ColumnResponse])
def reorder_columns(reorder_in: ColumnReorder, db: Session = Depends(get_db)):
    """Give every listed column ``position = index`` in one transaction.

    Unknown ids are skipped; columns left out keep their position. Returns the
    full column list in its new order.
    """
    with storage_guard(db, "reorder columns"):
        columns = {
            column.id: column
            for column in db.query(Column).filter(Column.id.in_(reorder_in.ids)).all()
        }
        for index, column_id in enumerate(reorder_in.ids):
            column = columns.get(column_id)
            if column is None:
                logger.warning("Reorder skipped unknown column %s", column_id)
                continue
            column.position = index
        db.commit()
        return _ordered_columns(db)


@router.put("/{column_id}", response_model=Optional[ColumnResponse])
def update_column(column_id: int, column_in: ColumnUpdate, db: Session = Depends(get_db)):
    """Overwrite a column; ``null`` when it does not exist."""
    with storage_guard(db, "update column"):
        column = db.query(Column).filter(Column.id == column_id).first()
        if column is None:
            return None
        column.title = column_in.title
        if column_in.position is not None:
            column.position = column_in.position
        db.commit()
        db.refresh(column)
        return column


@router.delete("/{column_id}", response_model=Optional[ColumnResponse])
def delete_column(column_id: int, db: Session = Depends(get_db)):
    """Delete a column and return it as it was; its tasks are left in place."""
    with storage_guard(db, "delete column"):
        column = db.query(Column).filter(Column.id == column_id).first()
        if column is None:
            return None
        deleted = ColumnResponse.model_validate(column)
        db.delete(column)
        db.commit()
    logger.info("Deleted column %s", column_id)
    return deleted
