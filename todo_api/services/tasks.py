# todo_api/services/tasks.py
"""
Task store. Every query carries the owner filter, and every write is a
single UPDATE/DELETE ... WHERE id AND owner_id RETURNING statement.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.models.task import Task
from todo_api.models.user import utcnow
from todo_api.schemas.task import TaskCreate, TaskStatus, TaskUpdate
from todo_api.utils.errors import NotFound, ValidationError

logger = logging.getLogger(__name__)


def _owned(owner_id: str, task_id: str):
    return (Task.id == task_id, Task.owner_id == owner_id)


async def create_task(db: AsyncSession, owner_id: str, data: TaskCreate) -> Task:
    task = Task(
        title=data.title,
        description=data.description,
        status=data.status,
        priority=data.priority,
        due_date=data.due_date,
        owner_id=owner_id,
    )
    db.add(task)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ValidationError("Error creating task", error=str(e.orig))

    logger.info("Task %s created by %s", task.id, owner_id)
    return task


async def list_tasks(db: AsyncSession, owner_id: str) -> List[Task]:
    result = await db.execute(
        select(Task).where(Task.owner_id == owner_id).order_by(Task.created_at, Task.id)
    )
    return list(result.scalars().all())


async def get_task(db: AsyncSession, owner_id: str, task_id: str) -> Task:
    result = await db.execute(select(Task).where(*_owned(owner_id, task_id)))
    task = result.scalar_one_or_none()
    if task is None:
        raise NotFound()
    return task


async def _update_owned(db: AsyncSession, owner_id: str, task_id: str, values: dict) -> Task:
    stmt = (
        update(Task)
        .where(*_owned(owner_id, task_id))
        .values(**values, updated_at=utcnow())
        .returning(Task)
        .execution_options(synchronize_session="fetch")
    )
    try:
        result = await db.execute(stmt)
        task = result.scalar_one_or_none()
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ValidationError("Error updating task", error=str(e.orig))

    if task is None:
        raise NotFound()
    return task


async def update_task(db: AsyncSession, owner_id: str, task_id: str, data: TaskUpdate) -> Task:
    """Replace every editable field of an owned task

    Omitted description and due_date are cleared to null rather than kept.
    """
    task = await _update_owned(
        db,
        owner_id,
        task_id,
        {
            "title": data.title,
            "description": data.description,
            "status": data.status,
            "priority": data.priority,
            "due_date": data.due_date,
        },
    )
    logger.info("Task %s updated by %s", task_id, owner_id)
    return task


async def update_task_status(db: AsyncSession, owner_id: str, task_id: str, status: TaskStatus) -> Task:
    task = await _update_owned(db, owner_id, task_id, {"status": status})
    logger.info("Task %s status set to %s by %s", task_id, status, owner_id)
    return task


async def delete_task(db: AsyncSession, owner_id: str, task_id: str) -> None:
    result = await db.execute(delete(Task).where(*_owned(owner_id, task_id)).returning(Task.id))
    deleted_id = result.scalar_one_or_none()
    await db.commit()

    if deleted_id is None:
        raise NotFound()
    logger.info("Task %s deleted by %s", task_id, owner_id)
