from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

TaskStatus = Literal["open", "in-progress", "done"]
TaskPriority = Literal["low", "medium", "high"]


class TaskBase(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = "open"
    priority: TaskPriority = "medium"
    due_date: Optional[date] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class TaskCreate(TaskBase):
    pass


class TaskUpdate(TaskBase):
    # PUT replaces the whole task: title, status and priority must be sent
    status: TaskStatus
    priority: TaskPriority


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskOut(BaseModel):
    id: str
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date]
    owner: str = Field(validation_alias="owner_id")
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class Message(BaseModel):
    message: str
