"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import AuthorizationError, ValidationError
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    """Attach all application routers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)


def register_error_handlers(app: FastAPI) -> None:
    """Render application errors as ``{"error": message}`` bodies."""

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return JSONResponse({"error": exc.message}, status_code=400)

    @app.exception_handler(AuthorizationError)
    async def _authorization_error(request: Request, exc: AuthorizationError):
        return JSONResponse({"error": exc.message}, status_code=401)


__all__ = ["register_error_handlers", "register_routes"]
