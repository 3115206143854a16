"""
User Store Interface

Defines the contract for credential storage.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.auth import User


class UserStoreInterface(ABC):
    """
    User Store Contract.

    Maps user id -> User and username -> User. Passwords are only ever
    stored hashed.
    """

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create_user(self, username: str, password: str) -> User:
        """Create a user. Raises ConflictError if the username is taken."""
        pass

    @abstractmethod
    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        pass
