import logging

from nbvideo.browser.session import SessionManager
from nbvideo.config import Settings
from nbvideo.models.job import Credentials, GenerationRequest, JobResult, SourceKind
from nbvideo.services.artifact_service import ArtifactRetriever
from nbvideo.services.auth_service import AuthenticationFlow
from nbvideo.services.errors import PreconditionError
from nbvideo.services.generation_service import GenerationTrigger
from nbvideo.services.ingestion_service import SourceIngestion
from nbvideo.services.readiness_poller import ReadinessPoller

logger = logging.getLogger(__name__)


class VideoGenerationService:
    """Runs one NotebookLM video job end to end inside a dedicated browser session."""

    def __init__(
        self,
        settings: Settings,
        session_manager: SessionManager | None = None,
        auth_flow: AuthenticationFlow | None = None,
        ingestion: SourceIngestion | None = None,
        trigger: GenerationTrigger | None = None,
        poller: ReadinessPoller | None = None,
        retriever: ArtifactRetriever | None = None,
    ) -> None:
        self._settings = settings
        self._sessions = session_manager or SessionManager(headless=settings.HEADLESS)
        self._auth = auth_flow or AuthenticationFlow()
        self._ingestion = ingestion or SourceIngestion()
        self._trigger = trigger or GenerationTrigger()
        self._poller = poller or ReadinessPoller(
            interval_seconds=settings.POLL_INTERVAL_SECONDS,
            deadline_seconds=settings.POLL_DEADLINE_SECONDS,
        )
        self._retriever = retriever or ArtifactRetriever(settings.DOWNLOAD_DIR)

    def build_request(
        self, source_type: str | None, source: str | None, title: str | None = None
    ) -> GenerationRequest:
        """Raises PreconditionError for missing fields or an unknown source type."""
        if not source_type or not source:
            raise PreconditionError("type and source are required")
        try:
            kind = SourceKind(source_type)
        except ValueError:
            allowed = ", ".join(k.value for k in SourceKind)
            raise PreconditionError(f"Unsupported type {source_type!r}; expected one of: {allowed}") from None
        return GenerationRequest(source_kind=kind, source_value=source, workspace_title=title or None)

    def credentials(self) -> Credentials:
        email = self._settings.GOOGLE_EMAIL
        password = self._settings.GOOGLE_PASSWORD
        if not email or not password:
            raise PreconditionError("Missing GOOGLE_EMAIL / GOOGLE_PASSWORD configuration", status_code=503)
        return Credentials(identity=email, secret=password)

    async def generate(
        self, source_type: str | None, source: str | None, title: str | None = None
    ) -> JobResult:
        """
        Validate, then run the whole pipeline. Preconditions raise before a
        browser is launched; every later fault becomes a failed JobResult.
        """
        request = self.build_request(source_type, source, title)
        credentials = self.credentials()
        return await self.run(request, credentials)

    async def run(self, request: GenerationRequest, credentials: Credentials) -> JobResult:
        logger.info("[job] starting | type=%s | source=%s", request.source_kind.value, request.source_value)
        try:
            async with self._sessions.session() as session:
                page = session.page
                await self._auth.login(page, credentials)
                await self._ingestion.open_workspace(page, request.workspace_title)
                await self._ingestion.add(page, request)
                await self._trigger.start(page)
                await self._poller.wait_until_ready(page)
                artifact = await self._retriever.capture(page)
        except Exception as exc:
            logger.exception("[job] failed | type=%s | error=%s", request.source_kind.value, exc)
            return JobResult.failed(str(exc))

        logger.info("[job] complete | file=%s", artifact.file_name)
        return JobResult.succeeded(artifact)
