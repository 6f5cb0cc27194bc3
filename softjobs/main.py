import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from softjobs.core.config import Settings, load_settings, validate_runtime_config
from softjobs.core.errors import register_exception_handlers
from softjobs.core.log_config import configure_logging, register_request_logging
from softjobs.database import build_engine, build_session_factory, init_schema
from softjobs.routes import user_routes

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    validate_runtime_config(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            init_schema(engine)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL and Postgres credentials.')
        yield
        engine.dispose()

    app = FastAPI(title='SoftJobs', lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Added first so CORS ends up outermost.
    register_request_logging(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials='*' not in settings.cors_origins,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    @app.get('/')
    def root():
        return {'status': 'SoftJobs API Running'}

    app.include_router(user_routes.router)
    return app


def run() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info('Server listening on http://%s:%s', settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == '__main__':
    run()
