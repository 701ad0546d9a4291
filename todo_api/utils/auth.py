# todo_api/utils/auth.py
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from todo_api.config.settings import Settings
from todo_api.utils.errors import InvalidToken, Unauthenticated
from todo_api.utils.security import decode_access_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Resolve the bearer token to a user id and attach it to the request"""
    if not token:
        raise Unauthenticated("Not authenticated")

    try:
        user_id = decode_access_token(token, settings)
    except InvalidToken as e:
        logger.info("Rejected token on %s %s: %s", request.method, request.url.path, e)
        raise Unauthenticated()

    request.state.user_id = user_id
    return user_id
