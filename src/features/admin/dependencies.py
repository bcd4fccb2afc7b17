"""Admin authentication dependencies for FastAPI."""

from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt.exceptions import InvalidTokenError

from .exceptions import InsufficientRoleException, InvalidTokenException
from .jwt_utils import ADMIN_ROLE, decode_token, verify_token_type

security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> dict[str, Any]:
    """Require a valid admin access token.

    Returns:
        Decoded token payload

    Raises:
        InvalidTokenException: If the token is missing, invalid or not an access token
        InsufficientRoleException: If the token is not an admin token

    """
    if credentials is None:
        raise InvalidTokenException(detail="Not authenticated")

    try:
        payload = decode_token(credentials.credentials)
    except InvalidTokenError as err:
        raise InvalidTokenException() from err

    if not verify_token_type(payload, "access"):
        raise InvalidTokenException(detail="Invalid token type")

    if payload.get("role") != ADMIN_ROLE:
        raise InsufficientRoleException(ADMIN_ROLE)

    return payload
