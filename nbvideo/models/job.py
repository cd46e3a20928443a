import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

VIDEO_MIME_TYPE = "video/mp4"


class SourceKind(str, Enum):
    FILE = "pdf"
    URL = "url"
    DOC_REFERENCE = "gdoc"


@dataclass(frozen=True)
class GenerationRequest:
    source_kind: SourceKind
    source_value: str
    workspace_title: str | None = None


@dataclass(frozen=True)
class Credentials:
    identity: str
    secret: str = field(repr=False)


class PollStatus(str, Enum):
    POLLING = "polling"
    READY = "ready"
    TIMED_OUT = "timed_out"


@dataclass
class PollState:
    interval_seconds: int
    deadline_seconds: int
    elapsed_seconds: int = 0
    ticks: int = 0
    status: PollStatus = PollStatus.POLLING

    @property
    def ready(self) -> bool:
        return self.status is PollStatus.READY

    @property
    def terminal(self) -> bool:
        return self.status is not PollStatus.POLLING


@dataclass(frozen=True)
class Artifact:
    file_name: str
    payload: bytes = field(repr=False)
    mime_type: str = VIDEO_MIME_TYPE
    produced_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def payload_base64(self) -> str:
        return base64.b64encode(self.payload).decode("ascii")


@dataclass(frozen=True)
class JobResult:
    artifact: Artifact | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.artifact is not None

    @classmethod
    def succeeded(cls, artifact: Artifact) -> "JobResult":
        return cls(artifact=artifact)

    @classmethod
    def failed(cls, message: str) -> "JobResult":
        return cls(error=message)
