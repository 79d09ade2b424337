"""
Identity token verification
Bearer tokens are issued by the external identity provider; we only verify them
"""
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from loguru import logger

from workpass.core.config import settings
from workpass.core.exceptions import AuthenticationException


class IdentityTokenVerifier:
    """Verifies HS256 (shared secret) or RS256 (public key) identity tokens"""

    def __init__(
        self,
        algorithm: Optional[str] = None,
        secret: Optional[str] = None,
        public_key: Optional[str] = None,
        audience: Optional[str] = None
    ):
        self.algorithm = algorithm or settings.IDP_JWT_ALGORITHM
        self.audience = (audience if audience is not None else settings.IDP_JWT_AUDIENCE) or None

        if self.algorithm == "RS256":
            self.key = public_key or settings.IDP_JWT_PUBLIC_KEY
        else:
            self.key = secret or settings.IDP_JWT_SECRET

        if not self.key:
            logger.warning(f"No verification key configured for {self.algorithm} identity tokens")

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a token

        Returns:
            The claims; ``sub`` is the user id

        Raises:
            AuthenticationException: bad signature, expired, or missing subject
        """
        if not self.key:
            raise AuthenticationException("Identity token verification is not configured")

        try:
            claims = jwt.decode(
                token,
                self.key,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise AuthenticationException("Invalid or expired token")

        if not claims.get("sub"):
            raise AuthenticationException("Token has no subject")
        return claims
