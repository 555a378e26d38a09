"""
Task Model
"""
from sqlalchemy import Column, Integer, String, Text
from workboard.database import Base


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Plain integer, not a ForeignKey: deleting a column leaves its tasks in place
    column_id = Column(Integer, index=True, nullable=False)
    content = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # Free strings; TaskPriority / TaskDifficulty in workboard.schemas are what the client offers
    priority = Column(String(50), nullable=True)
    difficulty = Column(String(50), nullable=True)
    position = Column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Task id={self.id} column_id={self.column_id} position={self.position}>"
