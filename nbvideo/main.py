import logging
import secrets
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nbvideo.api.routes import router
from nbvideo.config import Settings, settings
from nbvideo.schemas.generate import ErrorResponse
from nbvideo.services.video_service import VideoGenerationService

API_SECRET_HEADER = "x-api-secret"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _configure_logging(app_settings.LOG_LEVEL)
        logger = logging.getLogger(__name__)
        logger.info(
            "NotebookLM video API starting | download_dir=%s | port=%s",
            app_settings.DOWNLOAD_DIR,
            app_settings.PORT,
        )
        Path(app_settings.DOWNLOAD_DIR).mkdir(parents=True, exist_ok=True)
        app.state.generation_service = VideoGenerationService(app_settings)
        yield
        logger.info("NotebookLM video API shutting down")

    app = FastAPI(title="NotebookLM Video API", version="1.0.0", lifespan=lifespan)
    app.state.settings = app_settings

    @app.middleware("http")
    async def require_api_secret(request: Request, call_next):
        token = request.headers.get(API_SECRET_HEADER, "")
        if not secrets.compare_digest(token.encode(), app_settings.API_SECRET.encode()):
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})
        return await call_next(request)

    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request body")
        detail = f"{location}: {message}" if location else message
        return JSONResponse(status_code=400, content=ErrorResponse(error=f"Invalid request: {detail}").model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logging.getLogger(__name__).exception("Unhandled exception")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("nbvideo.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL)
