"""
Authentication endpoints.

Username/password accounts with a signed session cookie.
"""

import logging
from fastapi import APIRouter, HTTPException, Request

from app.schemas.auth import Credentials, UserResponse
from app.services.auth import get_user_store
from app.services.base import ConflictError

logger = logging.getLogger(__name__)

router = APIRouter()

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 4
SESSION_USER_KEY = "user_id"


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(credentials: Credentials):
    """
    Create an account.

    Username needs at least 3 characters, password at least 4.
    """
    username, password = credentials.username, credentials.password
    if (
        not username
        or not password
        or len(username) < MIN_USERNAME_LENGTH
        or len(password) < MIN_PASSWORD_LENGTH
    ):
        raise HTTPException(status_code=400, detail="Invalid username or password")

    store = get_user_store()

    try:
        user = await store.create_user(username, password)
    except ConflictError:
        raise HTTPException(status_code=409, detail="Username already exists")
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=500, detail="Registration failed")

    return UserResponse(id=user.id, username=user.username)


@router.post("/login", response_model=UserResponse)
async def login(credentials: Credentials, request: Request):
    """Check credentials and start a session."""
    username, password = credentials.username, credentials.password
    if not username or not password:
        raise HTTPException(status_code=400, detail="Username and password required")

    store = get_user_store()
    user = await store.get_user_by_username(username)
    if user is None or not store.verify_password(password, user.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    request.session[SESSION_USER_KEY] = user.id
    return UserResponse(id=user.id, username=user.username)


@router.post("/logout")
async def logout(request: Request):
    """End the current session (no-op without one)."""
    request.session.clear()
    return {"message": "Logged out"}


@router.get("/me")
async def me(request: Request):
    """Current session's user id."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return {"userId": user_id}
