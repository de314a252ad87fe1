"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from filegate.config import FilegateConfig
from filegate.exceptions import InvalidFileRequestError
from filegate.web.files import rejection_detail
from filegate.web.health import router as health_router
from filegate.web.requests import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(config: FilegateConfig | None = None) -> FastAPI:
    """Build the app with health check, request logging and rejection handling."""
    config = config or FilegateConfig()

    app = FastAPI(title="Filegate")
    app.state.config = config
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(health_router)

    @app.exception_handler(InvalidFileRequestError)
    async def invalid_file_request_handler(
        request: Request, exc: InvalidFileRequestError
    ) -> JSONResponse:
        logger.debug("Rejected file request on %s: %s", request.url.path, exc.reason.value)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": rejection_detail(exc.reason, config.expose_rejection_reason)},
        )

    return app
