# todo_api/schemas/tokens.py
from pydantic import BaseModel, Field

from todo_api.schemas.user import UserOut


class Token(BaseModel):
    token: str
    user: UserOut


class AuthStatus(BaseModel):
    message: str
    user_id: str = Field(alias="userId")

    model_config = {
        "populate_by_name": True
    }
