"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session
from billing_gateway.config import settings
from billing_gateway.infrastructure.database.models import Profile
from billing_gateway.infrastructure.database.repositories import ProfileRepository
from billing_gateway.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_profile(request: Request, db: Session = Depends(get_db)) -> Profile:
    """
    Resolve the calling profile from the identity header.

    Raises:
        HTTPException(401): Header missing, not an integer, or no such profile
    """
    raw_id = request.headers.get(settings.profile_header)
    try:
        profile_id = int(raw_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Unauthorized")

    profile = ProfileRepository(db).get_profile(profile_id)
    if profile is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return profile
