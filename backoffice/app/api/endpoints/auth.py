"""
Authentication API endpoints.

Provides admin login and the current-identity endpoint.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy import select
from backoffice.app.core.dependencies import get_current_admin, get_store
from backoffice.app.core.exceptions import AuthenticationError, ValidationError
from backoffice.app.core.jwt import create_access_token
from backoffice.app.core.security import verify_password
from backoffice.app.db.store import Store
from backoffice.app.models.admin import Admin
from backoffice.app.schemas.auth import AdminLogin, AdminSummary, TokenResponse, MeResponse

logger = logging.getLogger("backoffice.auth")

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: AdminLogin,
    store: Store = Depends(get_store)
):
    """
    Exchange username and password for a signed token.

    Unknown users and wrong passwords get the same response so the
    endpoint cannot be used to enumerate usernames.
    """
    if not credentials.username or not credentials.password:
        raise ValidationError("username and password required")

    admin = await store.fetch_one(
        select(Admin.__table__).where(Admin.username == credentials.username)
    )

    if admin is None or not verify_password(credentials.password, admin["password_hash"]):
        logger.warning("Failed login for username=%s", credentials.username)
        raise AuthenticationError("Invalid credentials")

    summary = AdminSummary(
        id=admin["id"],
        username=admin["username"],
        display_name=admin["display_name"]
    )
    token = create_access_token(data=summary.model_dump())

    logger.info("Admin %s logged in", summary.username)
    return TokenResponse(token=token, admin=summary)


@router.get("/admin/me", response_model=MeResponse)
async def get_current_admin_info(current_admin: dict = Depends(get_current_admin)):
    """Return the verified token claims of the calling admin."""
    return MeResponse(admin=current_admin)
