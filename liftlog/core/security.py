"""Security utilities: Clerk session-token (JWT) validation."""

from __future__ import annotations

import logging
from functools import lru_cache

import jwt

from liftlog.core.config import get_settings
from liftlog.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@lru_cache
def get_jwks_client() -> jwt.PyJWKClient | None:
    """JWKS client for the configured Clerk issuer (None when auth is not configured)."""
    url = get_settings().clerk_jwks_url
    return jwt.PyJWKClient(url) if url else None


def subject_from_authorization(authorization: str | None) -> str:
    """Validate a `Bearer <jwt>` header and return the token's subject (external user id)."""
    if not authorization:
        raise AuthenticationError("Missing authentication. Provide an Authorization header.")
    if not authorization.startswith("Bearer "):
        raise AuthenticationError("Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    jwks_client = get_jwks_client()
    if jwks_client is None:
        logger.error("JWT validation not configured (missing CLERK_ISSUER)")
        raise AuthenticationError("Authentication is not configured")

    try:
        signing_key = jwks_client.get_signing_key_from_jwt(token)
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            issuer=get_settings().clerk_issuer,
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.PyJWTError as e:
        raise AuthenticationError(f"Invalid token: {e}")

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Token missing user ID")
    return subject
