from dataclasses import dataclass, field
from enum import Enum

LABEL_PREVIEW_LENGTH = 60


class FileCategory(str, Enum):
    REPORT = "report"
    CODE = "code"
    KNOWLEDGE = "knowledge"


class GradeLevel(str, Enum):
    """Target density tier. Tier 1 is the most detailed, tier 3 the most condensed."""

    GRADE_1 = "1등급"
    GRADE_2 = "2등급"
    GRADE_3 = "3등급"

    @property
    def tier(self) -> int:
        return int(self.value[0])


class RecordType(str, Enum):
    AUTONOMY = "자율"
    CAREER = "진로"
    CLUB = "동아리"
    BEHAVIOR = "행특"


@dataclass(frozen=True)
class UploadedFile:
    """A file handed over by the form layer. Data is plain text or base64."""

    name: str
    mime_type: str
    data: str
    category: FileCategory


@dataclass(frozen=True)
class KnowledgeBaseEntry:
    """One user-supplied reference document."""

    data: str
    mime_type: str


@dataclass(frozen=True)
class GenerationParams:
    """Aggregate input to one generation."""

    grade_level: GradeLevel
    report_files: list[UploadedFile] = field(default_factory=list)
    code_files: list[UploadedFile] = field(default_factory=list)
    draft_text: str = ""
    record_type: RecordType | None = None
    custom_knowledge_base: list[KnowledgeBaseEntry] = field(default_factory=list)
    custom_subject_name: str | None = None
    custom_instructions: str | None = None


@dataclass(frozen=True)
class GeneratedResult:
    """Output of one generation call."""

    grade_version: str
    summary500: str | None = None
    summary300: str | None = None
    summary150: str | None = None


@dataclass(frozen=True)
class HistoryItem:
    """One persisted past generation result."""

    id: str
    timestamp: int
    result: GeneratedResult
    summary: str | None = None

    @property
    def label(self) -> str:
        """Short caption for history listings."""
        if self.summary:
            return self.summary
        text = self.result.grade_version
        if len(text) <= LABEL_PREVIEW_LENGTH:
            return text
        return text[:LABEL_PREVIEW_LENGTH] + "..."
