"""Dependency injection for FastAPI endpoints"""

from fastapi import HTTPException, Request
from spendwise.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_current_user_id(request: Request) -> str:
    """
    Authenticated user id forwarded by the identity provider.

    The gateway in front of this service verifies the session and sets the
    header; requests without it are rejected.
    """
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing user identity")
    return user_id
