from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    name = "AppError"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        error: dict[str, Any] = {
            "name": self.name,
            "message": self.message,
            "status": self.status_code,
        }
        if self.details is not None:
            error["details"] = dict(self.details)
        return {"error": error}


class ValidationError(AppError):
    name = "ValidationError"
    status_code = 400


class AuthError(AppError):
    name = "AuthError"
    status_code = 401


class UpstreamError(AppError):
    name = "UpstreamError"
    status_code = 500


class InternalError(AppError):
    name = "InternalError"
    status_code = 500

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)
