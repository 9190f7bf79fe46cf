from dataclasses import dataclass, field

from seteuk.records.models import KnowledgeBaseEntry, RecordType


@dataclass(frozen=True)
class NoKnowledgeBase:
    """No custom material and no record type: use the bundled corpora."""


@dataclass(frozen=True)
class InlineKnowledgeBase:
    """User-supplied reference documents, sent as-is."""

    entries: list[KnowledgeBaseEntry] = field(default_factory=list)


@dataclass(frozen=True)
class FixedKnowledgeBase:
    """The fixed reference documents of a record type."""

    record_type: RecordType


KnowledgeSource = NoKnowledgeBase | InlineKnowledgeBase | FixedKnowledgeBase


_AUTONOMY_CAREER_DOCUMENTS: tuple[str, ...] = (
    "자율활동 우수사례.pdf",
    "진로활동 우수사례.pdf",
    "활동 없는 자율활동 생기부 (1).pdf",
)

FIXED_DOCUMENTS: dict[RecordType, tuple[str, ...]] = {
    RecordType.CLUB: (
        "동아리활동 우수사례 1.pdf",
        "동아리활동 우수사례 2.pdf",
        "동아리활동 기재요령.pdf",
        "동아리활동 예시문.pdf",
    ),
    RecordType.BEHAVIOR: (
        "행동특성 및 종합의견 우수사례.pdf",
        "행동특성 및 종합의견 기재요령.pdf",
    ),
    RecordType.AUTONOMY: _AUTONOMY_CAREER_DOCUMENTS,
    RecordType.CAREER: _AUTONOMY_CAREER_DOCUMENTS,
}


def select_knowledge_source(
    custom_knowledge_base: list[KnowledgeBaseEntry] | None,
    record_type: RecordType | None,
) -> KnowledgeSource:
    """Pick the knowledge source for a request. The first matching rule wins."""
    if custom_knowledge_base:
        return InlineKnowledgeBase(entries=list(custom_knowledge_base))
    if record_type is not None:
        return FixedKnowledgeBase(record_type=record_type)
    return NoKnowledgeBase()


# Sole knowledge base for a dated activity with no other material.
ACTIVITY_DOCUMENT = "활동 없는 자율활동 생기부 (1).pdf"
