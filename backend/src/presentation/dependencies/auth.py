"""
Authentication Dependency for FastAPI.

Guidelines:
- Extracts and validates the JWT access token (Authorization: Bearer)
- Live endpoints pass the token as a `token` query parameter instead
- Returns AuthUser for use in route handlers
- Raises HTTPException 401 if unauthorized, 403 if the admin role is missing

Claims:
- sub (or id): user id, required
- role: "user" | "admin", defaults to "user"
- email: optional
- exp: required

Config (from src.config.settings):
- JWT_SECRET: empty means every token is rejected
- JWT_ALGORITHM
- JWT_ISSUER / JWT_AUDIENCE: checked only when set
"""

import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.config.settings import Config
from src.domain.entities.user import ROLE_ADMIN, ROLE_USER
from src.domain.exceptions import AuthenticationError
from src.domain.value_objects.user_id import UserId


@dataclass
class AuthUser:
    id: UserId
    role: str = ROLE_USER
    email: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


security = HTTPBearer(auto_error=False)


def verify_access_token(token: Optional[str]) -> AuthUser:
    """
    Decode and validate an access token.

    Raises:
        AuthenticationError if the token is missing, invalid, expired or the
        signing secret is not configured
    """
    if not Config.JWT_SECRET:
        raise AuthenticationError("Token verification is not configured")
    if not token:
        raise AuthenticationError("Missing access token")

    options = {"require": ["exp"]}
    kwargs = {}
    if Config.JWT_AUDIENCE:
        kwargs["audience"] = Config.JWT_AUDIENCE
    else:
        options["verify_aud"] = False
    if Config.JWT_ISSUER:
        kwargs["issuer"] = Config.JWT_ISSUER

    try:
        claims = jwt.decode(
            token,
            Config.JWT_SECRET,
            algorithms=[Config.JWT_ALGORITHM],
            options=options,
            **kwargs,
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")

    user_id = claims.get("sub") or claims.get("id")
    if not user_id:
        raise AuthenticationError("Missing required claims in token")
    role = claims.get("role") or ROLE_USER
    if role not in (ROLE_USER, ROLE_ADMIN):
        raise AuthenticationError(f"Unknown role in token: {role}")

    try:
        return AuthUser(id=UserId(str(user_id)), role=role, email=claims.get("email"))
    except ValueError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        return verify_access_token(credentials.credentials if credentials else None)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def require_admin(current_user: AuthUser = Depends(get_current_user)) -> AuthUser:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return current_user
