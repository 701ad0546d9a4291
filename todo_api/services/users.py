# todo_api/services/users.py
"""
Credential store: user registration and password verification
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from todo_api.models.user import User
from todo_api.utils.errors import DuplicateIdentity, InvalidCredentials
from todo_api.utils.security import DUMMY_PASSWORD_HASH, hash_password, verify_password

logger = logging.getLogger(__name__)


async def register_user(db: AsyncSession, username: str, email: str, password: str) -> User:
    """Create a user unless the username or the email is already taken"""
    result = await db.execute(
        select(User.id).where(or_(User.email == email, User.username == username)).limit(1)
    )
    if result.first() is not None:
        raise DuplicateIdentity()

    # Hashing is CPU bound, keep it off the event loop
    hashed = await run_in_threadpool(hash_password, password)
    user = User(username=username, email=email, hashed_password=hashed)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration
        await db.rollback()
        raise DuplicateIdentity()

    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """Return the user for a matching email and password

    Unknown emails and wrong passwords raise the same InvalidCredentials.
    """
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if user is None:
        await run_in_threadpool(verify_password, password, DUMMY_PASSWORD_HASH)
        raise InvalidCredentials()
    if not await run_in_threadpool(verify_password, password, user.hashed_password):
        raise InvalidCredentials()

    return user
