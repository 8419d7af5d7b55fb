from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.interfaces.media import DeletionQueue, UploadSigner
from src.config.logging import configure_logging
from src.config.settings import Settings, get_settings
from src.infrastructure.cloudinary.signer import CloudinaryUploadSigner
from src.infrastructure.queue.context import QueueContext
from src.interfaces.http.routers import cloudinary as cloudinary_router
from src.interfaces.http.schemas.cloudinary import VersionResponse
from src.interfaces.middleware.auth_middleware import AuthMiddleware
from src.interfaces.middleware.error_handler import register_error_handlers
from src.interfaces.middleware.secure_headers import SecureHeadersMiddleware

APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        queue_context = getattr(app.state, "queue_context", None)
        if queue_context is not None:
            queue_context.close()


def create_app(
    *,
    settings: Settings | None = None,
    upload_signer: UploadSigner | None = None,
    deletion_queue: DeletionQueue | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title="Cloudinary Gateway",
        version=APP_VERSION,
        description="Signed Cloudinary uploads and queued asset deletion",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.upload_signer = upload_signer or CloudinaryUploadSigner(
        bucket=settings.cloudinary_bucket,
        folder=settings.cloudinary_folder,
        api_key=settings.cloudinary_key,
        api_secret=settings.cloudinary_secret.get_secret_value(),
        api_base_url=settings.cloudinary_api_base_url,
    )
    app.state.queue_context = None
    if deletion_queue is None:
        app.state.queue_context = QueueContext.from_settings(settings)
        deletion_queue = app.state.queue_context.deletion_queue()
    app.state.deletion_queue = deletion_queue
    register_error_handlers(app)

    @app.get("/", response_model=VersionResponse, tags=["home"])
    async def home() -> VersionResponse:
        return VersionResponse(version=APP_VERSION)

    app.include_router(cloudinary_router.router)

    # Added last so CORS runs outermost and can answer preflight before auth
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(SecureHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("Cloudinary gateway ready (environment=%s)", settings.environment)
    return app


app = create_app()
