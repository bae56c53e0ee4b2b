from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nullspire.core.config import Settings, get_settings
from nullspire.core.security import AuthError, CredentialVerifier, build_verifier
from nullspire.repositories import SnapshotStore, build_snapshot_store
from nullspire.routers import admin as admin_router
from nullspire.routers import characters as characters_router
from nullspire.services.character_service import CharacterService, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _configure_logging(settings: Settings) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=settings.log_level)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_handler(request: Request, exc: ValidationError):
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def _not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(AuthError)
    async def _auth_handler(request: Request, exc: AuthError):
        return _error(401, "Unauthorized")

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed or missing JSON body
        return _error(400, "Missing fields")

    @app.exception_handler(StarletteHTTPException)
    async def _http_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def create_app(
    settings: Settings | None = None,
    *,
    store: SnapshotStore | None = None,
    verifier: CredentialVerifier | None = None,
) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (--factory)."""
    settings = settings or get_settings()
    _configure_logging(settings)

    app = FastAPI(title="Nullspire Character API")
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization", "X-Admin-Password"],
        )
    _register_error_handlers(app)

    snapshot_store = store or build_snapshot_store(settings)
    app.state.character_service = CharacterService(snapshot_store)
    app.state.credential_verifier = verifier or build_verifier(settings)
    app.state.storage_backend = settings.storage_backend

    @app.get("/health")
    def health():
        return {"status": "ok", "storage": app.state.storage_backend}

    app.include_router(characters_router.router)
    app.include_router(admin_router.router)
    logger.info("Nullspire API initialised (env=%s, storage=%s)", settings.app_env, settings.storage_backend)
    return app
