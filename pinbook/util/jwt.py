"""Identity token encoding and verification.

The account service signs a short-lived token after login and the browser
sends it back in the ``auth_token`` cookie. Pinbook shares the signing
secret and only ever reads the ``user_id``, ``name`` and ``exp`` claims.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from pinbook.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims carried by an identity token."""

    user_id: str
    name: str = ""
    exp: datetime


class JWTError(Exception):
    """Token is missing claims, badly signed or expired."""

    pass


def create_token(
    user_id: str, name: str, settings: AuthSettings, expires_in: timedelta
) -> str:
    """Sign a token the way the account service does.

    Used by tests and local tooling; production tokens come from the
    account service.
    """
    claims = {
        "user_id": user_id,
        "name": name,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` after checking its signature, expiry and claims.

    Args:
        token: Encoded token from the cookie
        settings: Shared secret and algorithm

    Returns:
        The token's claims

    Raises:
        JWTError: If the token is expired or otherwise invalid
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
