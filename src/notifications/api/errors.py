"""Exception handlers mapping service errors onto HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notifications.exceptions import UpstreamFetchFailure

logger = structlog.get_logger(__name__)


async def upstream_failure_handler(request: Request, exc: UpstreamFetchFailure) -> JSONResponse:
    logger.error(
        "Notification request aborted by upstream failure",
        path=request.url.path,
        status_code=exc.status_code,
        message=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder({"message": exc.message, "error": exc.errors}),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=jsonable_encoder({"errors": exc.errors()}))


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UpstreamFetchFailure, upstream_failure_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
