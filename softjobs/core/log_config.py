import logging
import time

from fastapi import FastAPI, Request, status

from softjobs.core.errors import SERVER_ERROR_MESSAGE, error_response

logger = logging.getLogger("softjobs.requests")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("softjobs").setLevel(level)


def register_request_logging(app: FastAPI) -> None:
    """Log every request and answer unexpected errors with a generic 500."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
