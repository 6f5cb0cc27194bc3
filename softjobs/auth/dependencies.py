import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from softjobs.auth import jwt_handler
from softjobs.core.config import Settings
from softjobs.core.errors import AuthenticationError, TokenRequiredError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_email(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    token = credentials.credentials if credentials is not None else None
    try:
        email = jwt_handler.decode_access_token(token, settings)
    except jwt_handler.MissingTokenError as exc:
        raise TokenRequiredError("Token requerido") from exc
    except jwt_handler.TokenError as exc:
        logger.warning("Rejected token on %s: %s", request.url.path, exc)
        raise AuthenticationError("Token inválido") from exc

    request.state.user_email = email
    return email
