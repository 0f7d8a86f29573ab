from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.core.exceptions import (
    DuplicateEntityError,
    InvalidArgumentError,
    LocationError,
    NotFoundError,
)

STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: LocationError) -> int:
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def location_error_handler(request: Request, exc: LocationError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"detail": exc.message, "error": type(exc).__name__},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LocationError, location_error_handler)
