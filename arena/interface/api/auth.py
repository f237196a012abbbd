"""Caller authentication helpers for API routes."""

from fastapi import HTTPException, status

from arena.domain.service import JWTService


def resolve_caller(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> str | None:
    """Resolve the caller identity from the auth cookie or a Bearer header.

    Returns:
        Caller identity, or None if no valid token was presented
    """
    token = auth_token
    if not token and authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()
    return jwt_service.identify(token)


def require_caller(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> str:
    """Resolve the caller identity or reject the request with 401.

    Raises:
        HTTPException: If no valid token was presented
    """
    user_id = resolve_caller(jwt_service, auth_token, authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
