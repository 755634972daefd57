"""Error envelope helpers and FastAPI exception handlers.

Every error response has the shape ``{"error": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_api.core.exceptions import FailedValidationError, RecordNotFoundError

NOT_FOUND_MESSAGE = "the requested resource could not be found"
SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"
RATE_LIMIT_MESSAGE = "rate limit exceeded"


def error_response(status_code: int, error: str | dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def method_not_allowed_message(method: str) -> str:
    return f"the {method} method is not supported for this resource"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)

    @app.exception_handler(FailedValidationError)
    async def failed_validation_handler(request: Request, exc: FailedValidationError) -> JSONResponse:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][-1]) if err.get("loc") else "request"
            errors.setdefault(field, err.get("msg", "invalid value"))
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(exc.status_code, NOT_FOUND_MESSAGE)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(exc.status_code, method_not_allowed_message(request.method))
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
            return error_response(exc.status_code, SERVER_ERROR_MESSAGE)
        return error_response(exc.status_code, str(exc.detail))
