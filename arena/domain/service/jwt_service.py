"""Caller identity service."""

import logfire

from arena.config import AuthSettings
from arena.util.jwt import JWTError, decode_token, issue_token

from .base import Service


class JWTService(Service):
    """Turns bearer tokens into caller identities.

    Organizer, voter and owner checks all compare against the identity this
    service extracts, so it is the single place tokens are trusted.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue(self, identity: str) -> str:
        """Sign a token for an identity."""
        return issue_token(identity, self.auth_settings)

    def identify(self, token: str | None) -> str | None:
        """Return the caller identity carried by a token.

        Missing, expired or forged tokens yield None; routes decide whether an
        anonymous caller is acceptable.
        """
        if not token:
            return None
        try:
            payload = decode_token(token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Rejected caller token", reason=str(e))
            return None
        return payload.sub
