import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from softjobs.auth import jwt_handler
from softjobs.auth.dependencies import get_current_email, get_settings
from softjobs.auth.passwords import dummy_password_hash, hash_password, verify_password
from softjobs.core.config import Settings
from softjobs.core.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from softjobs.database import get_db
from softjobs.models.user import User

router = APIRouter(tags=['usuarios'])

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = 'Credenciales incorrectas'


class RegisterRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    rol: str | None = None
    lenguage: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: int
    email: str
    rol: str
    lenguage: str

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str


class ProfileResponse(BaseModel):
    email: str
    rol: str
    lenguage: str

    model_config = ConfigDict(from_attributes=True)


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


@router.post('/usuarios', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if not all([data.email, data.password, data.rol, data.lenguage]):
        raise ValidationError('Todos los campos son obligatorios')

    try:
        if find_user_by_email(db, data.email) is not None:
            raise ConflictError('Usuario ya existe')

        user = User(
            email=data.email,
            hashed_password=hash_password(data.password, rounds=settings.bcrypt_rounds),
            rol=data.rol,
            lenguage=data.lenguage,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        # Lost a race against a concurrent registration of the same email.
        db.rollback()
        raise ConflictError('Usuario ya existe') from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Could not register %s', data.email)
        raise InternalError() from exc

    logger.info('Registered user %s (id=%s)', user.email, user.id)
    return {'message': 'Usuario registrado con éxito', 'user': UserResponse.model_validate(user)}


@router.post('/login', response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if not data.email or not data.password:
        raise ValidationError('Email y contraseña son obligatorios')

    try:
        user = find_user_by_email(db, data.email)
    except SQLAlchemyError as exc:
        logger.exception('Could not look up %s', data.email)
        raise InternalError() from exc

    if user is None:
        # Unknown emails pay the same bcrypt cost as a real check.
        verify_password(data.password, dummy_password_hash(settings.bcrypt_rounds))
        logger.warning('Failed login for %s', data.email)
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    if not verify_password(data.password, user.hashed_password):
        logger.warning('Failed login for %s', data.email)
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    token = jwt_handler.create_access_token(subject=user.email, settings=settings)
    logger.info('Login: %s', user.email)
    return {'message': 'Inicio de sesión exitoso', 'token': token}


@router.get('/usuarios', response_model=list[ProfileResponse])
def get_profile(
    email: str = Depends(get_current_email),
    db: Session = Depends(get_db),
):
    try:
        user = find_user_by_email(db, email)
    except SQLAlchemyError as exc:
        logger.exception('Could not load profile for %s', email)
        raise InternalError() from exc

    if user is None:
        raise NotFoundError('Usuario no encontrado')

    return [ProfileResponse.model_validate(user)]
