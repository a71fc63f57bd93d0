import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eventwall.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=409)


class InvalidImageError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=422)


class PayloadTooLargeError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=413)


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        # loc is ("body", "slideInterval") or ("query", "status")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=error_response("Validation failed", data=_field_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
