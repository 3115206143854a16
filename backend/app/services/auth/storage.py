"""
In-memory user store.

Users live for the lifetime of the process. Lookup by username is a
linear scan.
"""

import asyncio
import logging
import uuid
from typing import Optional

from app.core.config import settings
from app.schemas.auth import User
from app.services.auth.interface import UserStoreInterface
from app.services.auth import passwords
from app.services.base import ConflictError

logger = logging.getLogger(__name__)


class MemoryUserStore(UserStoreInterface):
    """Dict-backed user store."""

    name = "UserStore"

    def __init__(self, hash_iterations: Optional[int] = None):
        self._users: dict[str, User] = {}
        self._lock = asyncio.Lock()
        self._iterations = hash_iterations or settings.password_hash_iterations

    async def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    async def create_user(self, username: str, password: str) -> User:
        async with self._lock:
            if await self.get_user_by_username(username):
                raise ConflictError(self.name, "Username already exists")

            user = User(
                id=str(uuid.uuid4()),
                username=username,
                password=passwords.hash_password(password, self._iterations),
            )
            self._users[user.id] = user

        logger.info(f"Registered user {username}")
        return user

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return passwords.verify_password(plain_password, hashed_password)


# Singleton instance
_user_store: Optional[MemoryUserStore] = None


def get_user_store() -> MemoryUserStore:
    """Get the user store singleton."""
    global _user_store
    if _user_store is None:
        _user_store = MemoryUserStore()
    return _user_store
