import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from nbvideo.schemas.generate import (
    ErrorResponse,
    GenerateVideoRequest,
    GenerateVideoResponse,
    HealthResponse,
)
from nbvideo.services.errors import PreconditionError

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat())


@router.post(
    "/generate-video",
    response_model=GenerateVideoResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def generate_video(payload: GenerateVideoRequest, request: Request):
    service = request.app.state.generation_service

    try:
        result = await service.generate(payload.type, payload.source, payload.notebookTitle)
    except PreconditionError as exc:
        logger.info("[generate-video] rejected | type=%s | reason=%s", payload.type, exc)
        return _error(exc.status_code, str(exc))

    if not result.ok:
        return _error(500, result.error)

    artifact = result.artifact
    return GenerateVideoResponse(
        fileName=artifact.file_name,
        mimeType=artifact.mime_type,
        base64=artifact.payload_base64,
        generatedAt=artifact.produced_at.isoformat(),
    )
