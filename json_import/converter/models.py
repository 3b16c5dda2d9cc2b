from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DocumentKind(str, Enum):
    JSON_DATA = "json-data"
    TEMPLATE = "template"


@dataclass(frozen=True)
class SourceDocument:
    """Input document of a conversion run, read once and never mutated."""

    kind: DocumentKind
    text: str
    path: Path | None = None

    def describe(self) -> str:
        return str(self.path) if self.path is not None else f"<{self.kind.value}>"


class ConversionState(Enum):
    IDLE = "idle"
    PARSING = "parsing"
    WRITING = "writing"
    REPORTED = "reported"
    FAILED = "failed"


class RecordStatus(Enum):
    WRITTEN = "written"
    INCOMPLETE = "incomplete"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class RecordOutcome:
    """What happened to one record of the run."""

    index: int
    name: str
    path: str
    status: RecordStatus
    message: str = ""


@dataclass
class ConversionReport:
    """Result of a conversion run, filled in as the run progresses."""

    state: ConversionState = ConversionState.IDLE
    error_message: str = ""
    outcomes: list[RecordOutcome] = field(default_factory=list)
    cancelled: bool = False

    def count(self, status: RecordStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def written(self) -> int:
        """Notes persisted, including incomplete ones."""
        return self.count(RecordStatus.WRITTEN) + self.count(RecordStatus.INCOMPLETE)

    @property
    def incomplete(self) -> int:
        return self.count(RecordStatus.INCOMPLETE)

    @property
    def failed(self) -> int:
        return self.count(RecordStatus.FAILED)

    @property
    def skipped(self) -> int:
        return self.count(RecordStatus.SKIPPED)

    @property
    def succeeded(self) -> bool:
        return self.state is ConversionState.REPORTED and self.failed == 0

    def summary(self) -> str:
        text = (
            f"Import finished: {self.written} notes written "
            f"({self.incomplete} incomplete), {self.failed} failed"
        )
        if self.cancelled:
            text += f", {self.skipped} skipped after cancellation"
        return text
