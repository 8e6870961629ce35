"""
Request dependencies for FastAPI.

This module provides the store dependency and the bearer-token check that
protects every admin route.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from backoffice.app.core.exceptions import AuthenticationError
from backoffice.app.core.jwt import decode_access_token
from backoffice.app.db.store import Store

# HTTP Bearer security scheme. Missing credentials are reported by
# get_current_admin so the response is always 401.
security = HTTPBearer(auto_error=False)


def get_store(request: Request) -> Store:
    """Return the Store built at startup."""
    return request.app.state.store


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    FastAPI dependency for JWT authentication.

    Verification is stateless: only the token signature and expiry are checked.

    Args:
        credentials: HTTP Bearer token from the Authorization header

    Returns:
        Decoded token claims (id, username, display_name, iat, exp)

    Raises:
        AuthenticationError: 401 if the token is missing, malformed, tampered or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Invalid token")

    return payload
