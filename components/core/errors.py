"""Application-wide error handlers."""

import fastapi
import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log the failure and answer with a generic retry message."""
    logger.error(
        "database_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error. Please try again."},
    )


def register_error_handlers(app: fastapi.FastAPI) -> None:
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
