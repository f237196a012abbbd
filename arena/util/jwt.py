"""Caller identity tokens.

The registry trusts the ``sub`` claim of an HS256 token signed with
``AUTH__JWT_SECRET``. Tokens are normally minted by the login layer in
front of the registry; ``issue_token`` exists for tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from arena.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded identity claims."""

    sub: str  # Caller identity (account id or wallet address)
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded or is no longer valid."""


def issue_token(identity: str, settings: AuthSettings) -> str:
    """Sign a token asserting ``identity`` as the caller."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": identity,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is malformed, forged, expired or lacks a subject
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    if not claims["sub"]:
        raise JWTError("Token subject is empty")
    return TokenPayload(**claims)
