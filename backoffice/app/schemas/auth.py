"""
Authentication Pydantic schemas.

Defines request and response schemas for the login and identity endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


class AdminLogin(BaseModel):
    """
    Schema for admin login.

    Both fields are checked by the endpoint so a missing field yields the
    same "username and password required" error as an empty one.
    """
    username: Optional[str] = Field(default=None, description="Admin username")
    password: Optional[str] = Field(default=None, description="Password")


class AdminSummary(BaseModel):
    """Public identity of an admin, as embedded in the token."""
    id: int
    username: str
    display_name: Optional[str] = None


class TokenResponse(BaseModel):
    """Returned by a successful login."""
    token: str = Field(..., description="Signed bearer token")
    admin: AdminSummary


class MeResponse(BaseModel):
    """
    Schema for GET /api/admin/me.

    `admin` carries the verified token claims as-is.
    """
    admin: dict
