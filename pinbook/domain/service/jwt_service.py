"""Identity token domain service."""

from uuid import UUID

import logfire

from pinbook.config import AuthSettings
from pinbook.domain.value import UserId
from pinbook.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies identity tokens issued by the account service."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Secret and algorithm shared with the issuer
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry and return the claims.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Identity token rejected", error=str(e))
                raise

    def resolve_user_id(self, token: str) -> UserId:
        """The user a token was issued to.

        Raises:
            JWTError: If the token fails verification or its ``user_id``
                claim is not a UUID
        """
        payload = self.verify_token(token)
        try:
            return UserId(UUID(payload.user_id))
        except ValueError as e:
            logfire.warn("Identity token names no valid user", user_id=payload.user_id)
            raise JWTError("Invalid token subject") from e
