from enum import Enum

from seteuk.records.models import RecordType


class RecordCategory(str, Enum):
    """Logical record category. Each one owns its own history and knowledge base cache."""

    SUBJECT = "subject"
    CLUB = "club"
    AUTONOMY = "autonomy"
    BEHAVIOR = "behavior"

    @property
    def storage_prefix(self) -> str:
        # Subject-record keys predate the per-category apps and carry no prefix.
        return "" if self is RecordCategory.SUBJECT else f"{self.value}_"

    @property
    def history_key(self) -> str:
        return f"history_{self.value}"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def default_record_type(self) -> RecordType | None:
        return _DEFAULT_RECORD_TYPES[self]


_LABELS = {
    RecordCategory.SUBJECT: "교과세특",
    RecordCategory.CLUB: "동아리 활동",
    RecordCategory.AUTONOMY: "자율/진로",
    RecordCategory.BEHAVIOR: "행동특성",
}

_DEFAULT_RECORD_TYPES = {
    RecordCategory.SUBJECT: None,
    RecordCategory.CLUB: RecordType.CLUB,
    RecordCategory.AUTONOMY: RecordType.AUTONOMY,
    RecordCategory.BEHAVIOR: RecordType.BEHAVIOR,
}
