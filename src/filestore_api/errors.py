"""Exceptions raised by the routes and the handlers that render them as JSON envelopes."""

import logging
from typing import Dict, List, Sequence

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from filestore_api import messages

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query", "header", "cookie")


class FilesApiError(Exception):
    """An expected failure with a status code and a client-facing message."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileConflictError(FilesApiError):
    status_code = status.HTTP_409_CONFLICT


class FileMissingError(FilesApiError):
    status_code = status.HTTP_404_NOT_FOUND


def _group_errors_by_field(errors: Sequence[dict]) -> Dict[str, List[str]]:
    """Turn pydantic error dicts into `{"field": ["msg", ...]}`."""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return grouped


def _validation_response(errors: Sequence[dict]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "message": messages.INVALID_REQUEST,
            "errors": _group_errors_by_field(errors),
        },
    )


async def handle_files_api_errors(request: Request, exc: FilesApiError) -> JSONResponse:
    """Render a conflict or not-found outcome as `{message}`."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_http_exceptions(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched routes and methods, rendered in the same envelope as every other error."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation_errors(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed request fields."""
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return _validation_response(exc.errors())


async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that propagates out of the route handlers."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": messages.INTERNAL_ERROR},
        )
