"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from blog.util.error import UtilError


class TokenClaims(BaseModel):
    """Signed identity claims carried by a bearer token."""

    subject_id: UUID
    email: str
    expires_at: datetime


class JWTError(UtilError):
    """JWT-related error."""

    pass


class InvalidTokenError(JWTError):
    """Token is malformed or its signature does not match."""

    pass


class TokenExpiredError(JWTError):
    """Token signature is valid but its expiry has passed."""

    pass


class TokenSigningError(JWTError):
    """Token could not be signed."""

    pass


def create_token(
    subject_id: UUID,
    email: str,
    secret: str,
    ttl: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Create a signed JWT for a subject.

    Args:
        subject_id: User ID the token identifies
        email: User email
        secret: Signing secret
        ttl: Lifetime of the token
        algorithm: JWT signing algorithm

    Returns:
        Encoded JWT token

    Raises:
        TokenSigningError: If the token cannot be signed
    """
    if not secret:
        raise TokenSigningError("Signing secret is not available")

    issued_at = datetime.now(timezone.utc)
    payload = {
        "sub": str(subject_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }

    try:
        return jwt.encode(payload, secret, algorithm=algorithm)
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise TokenSigningError(f"Failed to sign token: {e}") from e


def verify_token(token: str, secret: str, algorithm: str = "HS256") -> TokenClaims:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        secret: Signing secret
        algorithm: Expected signing algorithm

    Returns:
        Decoded claims

    Raises:
        TokenExpiredError: If the signature is valid but the token expired
        InvalidTokenError: If the token is malformed or the signature is wrong
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError("Invalid token") from e

    try:
        return TokenClaims(
            subject_id=UUID(payload["sub"]),
            email=payload.get("email", ""),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token claims") from e
