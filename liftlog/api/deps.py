"""Shared FastAPI dependencies."""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.exceptions import AuthenticationError
from liftlog.core.security import subject_from_authorization
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.services.identity import user_by_external_id


async def get_current_user(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the bearer token's subject to the internal user row.

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    subject = subject_from_authorization(authorization)
    user = await user_by_external_id(db, subject)
    if user is None:
        raise AuthenticationError("Can't get current user")
    return user
