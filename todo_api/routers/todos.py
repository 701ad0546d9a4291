import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db
from todo_api.schemas.task import Message, TaskCreate, TaskOut, TaskStatusUpdate, TaskUpdate
from todo_api.services import tasks as task_service
from todo_api.utils.auth import get_current_user_id
from todo_api.utils.errors import StoreFailure

logger = logging.getLogger(__name__)

# Every route here sits behind the session guard
router = APIRouter(dependencies=[Depends(get_current_user_id)])


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await task_service.create_task(db, user_id, task)
    except SQLAlchemyError as e:
        logger.exception("Error in create_task")
        raise StoreFailure("Error creating task", error=str(e))


@router.get("", response_model=List[TaskOut])
async def list_tasks(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await task_service.list_tasks(db, user_id)
    except SQLAlchemyError as e:
        logger.exception("Error in list_tasks")
        raise StoreFailure("Error fetching tasks", error=str(e))


@router.get("/{task_id}", response_model=TaskOut)
async def get_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await task_service.get_task(db, user_id, task_id)
    except SQLAlchemyError as e:
        logger.exception("Error in get_task")
        raise StoreFailure("Error fetching task", error=str(e))


@router.put("/{task_id}", response_model=TaskOut)
async def update_task(
    task_id: str,
    task_update: TaskUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await task_service.update_task(db, user_id, task_id, task_update)
    except SQLAlchemyError as e:
        logger.exception("Error in update_task")
        raise StoreFailure("Error updating task", error=str(e))


@router.patch("/{task_id}", response_model=TaskOut)
async def update_task_status(
    task_id: str,
    status_update: TaskStatusUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await task_service.update_task_status(db, user_id, task_id, status_update.status)
    except SQLAlchemyError as e:
        logger.exception("Error in update_task_status")
        raise StoreFailure("Error updating task", error=str(e))


@router.delete("/{task_id}", response_model=Message)
async def delete_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        await task_service.delete_task(db, user_id, task_id)
    except SQLAlchemyError as e:
        logger.exception("Error in delete_task")
        raise StoreFailure("Error deleting task", error=str(e))

    return {"message": "Task deleted successfully"}
