"""
User service — read access to the User aggregate.

Users are created outside this API; the service only lists them and
looks them up by username.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import User

USERNAME_NOT_FOUND_MSG = "username not found in the database"


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _user_to_dict(user: User) -> dict:
    """Serialise a User ORM instance to a plain dict."""
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_users(db: AsyncSession) -> list[dict]:
    """Return all users ordered by username."""
    result = await db.execute(select(User).order_by(User.username))
    return [_user_to_dict(u) for u in result.scalars().all()]


async def get_user(db: AsyncSession, username: str) -> dict:
    """
    Return the user whose username is exactly *username*.

    Raises ``NotFound`` when no such user exists.
    """
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFound(USERNAME_NOT_FOUND_MSG)
    return _user_to_dict(user)
