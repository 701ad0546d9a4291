import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.config.settings import Settings
from todo_api.database import get_db
from todo_api.schemas.tokens import AuthStatus, Token
from todo_api.schemas.user import UserCreate, UserEnvelope, UserLogin
from todo_api.services.users import authenticate_user, register_user
from todo_api.utils.auth import get_current_user_id, get_settings
from todo_api.utils.errors import InvalidCredentials, StoreFailure
from todo_api.utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    try:
        new_user = await register_user(db, user.username, user.email, user.password)
    except SQLAlchemyError as e:
        logger.exception("Error creating user %s", user.username)
        raise StoreFailure("Error creating user", error=str(e))

    return {"user": new_user}


@router.post("/login", response_model=Token)
async def login(
    user: UserLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    try:
        db_user = await authenticate_user(db, user.email, user.password)
    except InvalidCredentials:
        logger.info("Failed login for %s", user.email)
        raise
    except SQLAlchemyError as e:
        logger.exception("Error logging in %s", user.email)
        raise StoreFailure("Error logging in", error=str(e))

    token = create_access_token(db_user.id, settings)
    logger.info("User %s logged in", db_user.id)
    return {"token": token, "user": db_user}


@router.get("/auth", response_model=AuthStatus)
async def check_auth(user_id: str = Depends(get_current_user_id)):
    return {"message": "Authenticated", "user_id": user_id}
