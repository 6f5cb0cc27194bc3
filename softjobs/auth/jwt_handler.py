from datetime import datetime, timedelta, timezone

import jwt

from softjobs.core.config import Settings


class TokenError(Exception):
    pass


class MissingTokenError(TokenError):
    pass


class InvalidTokenError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


def create_access_token(subject: str, settings: Settings, expires_minutes: int | None = None) -> str:
    expire_minutes = settings.jwt_expires_minutes if expires_minutes is None else expires_minutes
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=expire_minutes)
    payload = {"sub": subject, "exp": expire, "iat": issued_at}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str | None, settings: Settings) -> str:
    """Verify signature and expiry and return the subject email."""
    if not token:
        raise MissingTokenError("No token supplied")

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredTokenError("Token has expired") from exc
    except jwt.PyJWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError("Invalid token subject")
    return subject
