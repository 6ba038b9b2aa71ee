# tutorhub/main.py
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from tutorhub.api.v1 import api_router
from tutorhub.core.config import Settings, get_settings
from tutorhub.core.exceptions import register_exception_handlers
from tutorhub.core.logging_config import (
    generate_request_id,
    request_id_var,
    setup_logging,
)
from tutorhub.db.init_db import init_db
from tutorhub.db.session import Database

logger = logging.getLogger("tutorhub.http")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Path(settings.UPLOADS_DIR).mkdir(parents=True, exist_ok=True)
        database = Database(settings.DATABASE_URL)
        init_db(database, settings)
        app.state.db = database
        logger.info(f"{settings.PROJECT_NAME} started")
        try:
            yield
        finally:
            database.dispose()
            logger.info(f"{settings.PROJECT_NAME} stopped")

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or generate_request_id()
        token = request_id_var.set(req_id)
        start_time = time.time()
        try:
            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000
            response.headers["X-Request-ID"] = req_id
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({duration_ms:.1f} ms)"
            )
            return response
        finally:
            request_id_var.reset(token)

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # directory is created by the lifespan, so skip the check at mount time
    app.mount(
        settings.UPLOADS_URL_PATH,
        StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
        name="uploads",
    )
    return app


app = create_app()
