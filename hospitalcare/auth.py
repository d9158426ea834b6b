"""
Auth module: password hashing, session tokens and the FastAPI dependencies
that resolve the calling user.

A session token is an HS256 JWT whose subject is the user id. It is read
from the session cookie first, then from an `Authorization: Bearer` header.
A missing, invalid or expired token, or one naming a user that no longer
exists, is rejected with 401.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional
from jose import jwt, JWTError
from fastapi import Depends, Request
from werkzeug.security import generate_password_hash, check_password_hash
from hospitalcare.config import Settings, get_settings
from hospitalcare.exceptions import Forbidden, Unauthorized
from hospitalcare.schemas import User
from hospitalcare.storage import Storage, get_storage

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
STAFF_ROLES = ("doctor", "nurse")


@dataclass
class UserPrincipal:
    """Resolved identity attached to each request."""
    id: int
    username: str
    full_name: str
    role: str                     # "patient" | "doctor" | "nurse"

    @classmethod
    def from_user(cls, user: User) -> "UserPrincipal":
        return cls(id=user.id, username=user.username, full_name=user.full_name, role=user.role)

    @property
    def is_patient(self) -> bool:
        return self.role == "patient"

    @property
    def is_doctor(self) -> bool:
        return self.role == "doctor"

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, stored: str) -> bool:
    # Malformed stored values (no "method$salt$hash" shape) never match
    return check_password_hash(stored, password)


def create_token(user: User, settings: Settings) -> str:
    payload = {
        "sub": str(user.id),
        "role": user.role,
        "exp": int(time.time()) + settings.token_expire_seconds,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> Optional[int]:
    """Return the user id carried by a token, or None if invalid/expired."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[ALGORITHM])
        return int(payload["sub"])
    except (JWTError, KeyError, ValueError):
        return None


def _request_token(request: Request, settings: Settings) -> Optional[str]:
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:]
    return None


def get_settings_dep(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_current_user(
    request: Request,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings_dep),
) -> UserPrincipal:
    """FastAPI dependency. Raises Unauthorized unless a valid session is present."""
    token = _request_token(request, settings)
    if not token:
        raise Unauthorized()
    user_id = decode_token(token, settings)
    if user_id is None:
        logger.info("Rejected invalid session token on %s", request.url.path)
        raise Unauthorized()
    user = await storage.get_user(user_id)
    if user is None:
        logger.info("Session names unknown user %s", user_id)
        raise Unauthorized()
    return UserPrincipal.from_user(user)


def require_roles(*roles: str):
    """Dependency factory: the caller must hold one of `roles`."""

    async def dependency(current_user: UserPrincipal = Depends(get_current_user)) -> UserPrincipal:
        if current_user.role not in roles:
            logger.info("Role %s denied on route requiring %s", current_user.role, roles)
            raise Forbidden()
        return current_user

    return dependency
