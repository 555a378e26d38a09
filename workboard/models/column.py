"""
Column Model
"""
from sqlalchemy import Column as SAColumn, Integer, String
from workboard.database import Base


class Column(Base):
    __tablename__ = "columns"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = SAColumn(Integer, primary_key=True, index=True, autoincrement=True)
    title = SAColumn(String(255), nullable=False)
    position = SAColumn(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Column id={self.id} title={self.title!r} position={self.position}>"
