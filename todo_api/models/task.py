# todo_api/models/task.py
from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from todo_api.database import Base
from todo_api.models.user import new_id, utcnow

TASK_STATUSES = ("open", "in-progress", "done")
TASK_PRIORITIES = ("low", "medium", "high")


def _in_domain(column: str, values) -> str:
    allowed = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({allowed})"


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(_in_domain("status", TASK_STATUSES), name="ck_tasks_status"),
        CheckConstraint(_in_domain("priority", TASK_PRIORITIES), name="ck_tasks_priority"),
        CheckConstraint("length(title) > 0", name="ck_tasks_title"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, default="open", nullable=False)
    priority = Column(String, default="medium", nullable=False)
    due_date = Column(Date, nullable=True)
    owner_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    owner = relationship("User", back_populates="tasks")
