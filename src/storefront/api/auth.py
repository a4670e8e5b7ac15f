"""Bearer-token authentication for the HTTP boundary.

Tokens are HS256 JWTs whose ``sub`` claim is the user id and whose ``role``
claim is ``user`` or ``admin``. The resolved identity is handed to the core
explicitly; nothing is attached to the request object.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from fastapi import Header, HTTPException

from storefront.config import get_settings
from storefront.errors import MissingIdentity
from storefront.user.user import UserRole


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: str = UserRole.USER.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def issue_token(user_id, role: str = UserRole.USER.value, expires_in: timedelta = timedelta(days=7)) -> str:
    settings = get_settings()
    payload = {
        "sub": str(user_id),
        "role": role,
        "exp": datetime.now(UTC) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def authenticated_identity(authorization: str | None = Header(None)) -> Identity:
    """FastAPI dependency resolving the caller from the Authorization header."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authentication required")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Authorization header must be 'Bearer <token>'")

    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token") from None

    user_id = payload.get("sub")
    if not user_id:
        raise MissingIdentity()

    return Identity(user_id=str(user_id), role=payload.get("role") or UserRole.USER.value)
