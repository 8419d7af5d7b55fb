from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError
from src.config.settings import Settings
from src.infrastructure.auth.tokens import tokens_match

PUBLIC_PATHS: Iterable[str] = (
    "/",
    "/docs",
    "/docs/oauth2-redirect",
    "/openapi.json",
    "/redoc",
)


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                raise AuthError("Unauthorized")
            scheme, _, rest = authorization.partition(" ")
            token = rest.strip(" ")
            if scheme != "Bearer" or not token:
                raise AuthError("Unauthorized")
            if not tokens_match(token, self.settings.bearer_token.get_secret_value()):
                raise AuthError("Unauthorized")
            return await call_next(request)
        except AuthError as exc:
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_payload(),
                headers={"WWW-Authenticate": 'Bearer realm=""'},
            )
