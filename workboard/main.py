"""
WorkBoard API application.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workboard.api.v1 import api_router
from workboard.config import settings
from workboard.database import init_db
from workboard.errors import register_error_handlers
from workboard.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}

    return app


init_db()
app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
