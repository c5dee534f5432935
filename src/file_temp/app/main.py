from contextlib import asynccontextmanager
from fastapi import FastAPI

from file_temp.app.api.v1.router import api_router
from file_temp.app.core import settings
from file_temp.app.core.deps import get_upload_policy
from file_temp.app.core.logging_config import configure_logging
from file_temp.app.exception_handlers import register_exception_handlers


def create_app():
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        # fail fast on a bad size string / charset before serving requests
        get_upload_policy()
        yield

    app = FastAPI(title="file-temp", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")
    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app

app = create_app()
