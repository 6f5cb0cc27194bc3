from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from softjobs.core.config import Settings

Base = declarative_base()

IN_MEMORY_SQLITE_URLS = {'sqlite://', 'sqlite:///:memory:'}


def build_engine(settings: Settings) -> Engine:
    if settings.database_url in IN_MEMORY_SQLITE_URLS:
        # A single shared connection, otherwise each checkout gets an empty database.
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )

    if settings.database_url.startswith('sqlite'):
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={'check_same_thread': False},
        )

    return create_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_schema(engine: Engine) -> None:
    # Registers the usuarios table on Base.metadata.
    from softjobs.models import user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
