"""
FastAPI Dependencies
Current user and rate limiting
"""
from typing import Optional

from fastapi import Depends, Header
from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address

from workpass.core.exceptions import AuthenticationException
from workpass.domain.entities import User
from workpass.application.repositories.interfaces import IUserRepository
from workpass.infrastructure.security.jwt_service import IdentityTokenVerifier
from .container import get_token_verifier, get_user_repository


# Rate limiter (keyed by client address)
limiter = Limiter(key_func=get_remote_address)


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthenticationException("Missing authorization header")

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationException("Invalid authorization header format")
    return parts[1]


async def get_current_user(
    authorization: Optional[str] = Header(None),
    verifier: IdentityTokenVerifier = Depends(get_token_verifier),
    user_repo: IUserRepository = Depends(get_user_repository)
) -> User:
    """
    Resolve the caller from the identity provider's bearer token

    The local user row is upserted from the token claims, so the first
    authenticated request creates it.

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            ...
    """
    claims = verifier.verify_token(_bearer_token(authorization))

    try:
        claimed = User(
            id=str(claims["sub"]),
            email=claims.get("email"),
            first_name=claims.get("first_name") or claims.get("given_name"),
            last_name=claims.get("last_name") or claims.get("family_name"),
            profile_image_url=claims.get("profile_image_url") or claims.get("picture"),
        )
    except ValueError as e:
        logger.warning(f"Rejected identity claims: {e}")
        raise AuthenticationException("Invalid token claims")

    return await user_repo.upsert(claimed)
