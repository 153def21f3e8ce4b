"""Translate review service errors into JSON HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reviews.exceptions import InvalidArgument, PersistenceFailure, SourceUnavailable

logger = structlog.get_logger(__name__)


async def _invalid_argument(request: Request, exc: InvalidArgument) -> JSONResponse:
    logger.info("invalid_request", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', err)}" for err in exc.errors()
    )
    logger.info("invalid_request", path=request.url.path, error=problems)
    return JSONResponse(status_code=400, content={"error": problems or "Malformed request"})


async def _source_unavailable(request: Request, exc: SourceUnavailable) -> JSONResponse:
    logger.error("review_source_unavailable", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to fetch hostaway reviews"})


async def _persistence_failure(request: Request, exc: PersistenceFailure) -> JSONResponse:
    logger.error("approval_save_failed", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to save approval"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgument, _invalid_argument)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(SourceUnavailable, _source_unavailable)
    app.add_exception_handler(PersistenceFailure, _persistence_failure)
