from .user import User
from .task import Task, TASK_STATUSES, TASK_PRIORITIES
