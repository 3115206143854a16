"""
Authentication contracts.

Fields are optional on the request models so the endpoints can answer
missing credentials with a 400 rather than a schema error.
"""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel


class Credentials(BaseModel):
    """Body of register and login requests."""

    username: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public view of a user."""

    id: str
    username: str


@dataclass
class User:
    """Stored user record. `password` holds the encoded hash, never plain text."""

    id: str
    username: str
    password: str
