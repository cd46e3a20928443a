from pydantic import BaseModel


class GenerateVideoRequest(BaseModel):
    # Optional at the schema level so missing fields surface as a 400 precondition failure
    type: str | None = None
    source: str | None = None
    notebookTitle: str | None = None


class GenerateVideoResponse(BaseModel):
    success: bool = True
    fileName: str
    mimeType: str
    base64: str
    generatedAt: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
