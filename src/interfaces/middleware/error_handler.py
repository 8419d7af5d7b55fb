from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, InternalError, ValidationError
from src.interfaces.middleware.secure_headers import DEFAULT_SECURE_HEADERS

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.name,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
        error = ValidationError(
            "; ".join(messages) or "Invalid request",
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return JSONResponse(status_code=error.status_code, content=error.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(  # noqa: WPS430
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        payload = {
            "error": {
                "name": "HttpException",
                "message": exc.detail or _reason_phrase(exc.status_code),
                "status": exc.status_code,
            }
        }
        return JSONResponse(status_code=exc.status_code, content=payload, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        error = InternalError()
        # Rendered by the outermost error middleware, past SecureHeadersMiddleware
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_payload(),
            headers=dict(DEFAULT_SECURE_HEADERS),
        )
