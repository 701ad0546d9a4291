from .user import UserCreate, UserLogin, UserOut, UserEnvelope
from .tokens import Token, AuthStatus
from .task import TaskCreate, TaskUpdate, TaskStatusUpdate, TaskOut, TaskStatus, TaskPriority, Message
