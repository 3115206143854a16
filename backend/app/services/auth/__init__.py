"""
Authentication Service

In-memory user store with salted password hashes. Sessions themselves
are handled by the signed session cookie middleware.
"""

from app.services.auth.interface import UserStoreInterface
from app.services.auth.storage import MemoryUserStore, get_user_store

__all__ = [
    "UserStoreInterface",
    "MemoryUserStore",
    "get_user_store",
]
