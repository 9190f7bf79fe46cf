"""Per-grade length targets and writing-style rules.

Subject records are measured in characters (spaces included). Autonomy,
career, club and behavior records are measured in NEIS bytes, because that
is how the grading system enforces their quota. The two units never mix.
"""

from dataclasses import dataclass
from enum import Enum

from seteuk.records.models import GradeLevel, RecordType


class LengthUnit(str, Enum):
    CHARACTERS = "characters"
    BYTES = "bytes"

    @property
    def label(self) -> str:
        return "자" if self is LengthUnit.CHARACTERS else "byte"


STYLE_RULES: tuple[str, ...] = (
    "학생 이름과 '위 학생은', '해당 학생은', '학습자는', '학생은' 같은 지칭 표현을 쓰지 말고 주어를 생략할 것.",
    "[12정01-01] 같은 성취기준 코드를 절대 쓰지 말 것.",
    "괄호는 활동 날짜 표기(예: 2025.03.14.) 외에는 쓰지 말고 '딕셔너리(item)'는 '딕셔너리 item'처럼 풀어 쓸 것.",
    "작은따옴표와 큰따옴표는 교과명이나 프로젝트명 같은 고유 명칭에만 최소한으로 쓸 것.",
    "'탐구 동기', '탐구 과정', '탐구 결과', '평가 및 피드백' 같은 섹션 헤더 어휘를 쓰지 말고 자연스러운 줄글로 이을 것.",
    "모든 문장은 '~함', '~임', '~음', '~됨' 중 하나로만 끝낼 것.",
    "짧게 끊어지는 단문을 피하고 '~하며', '~하여', '~함으로써' 같은 연결어로 이어진 복문으로 쓸 것.",
    "학생의 속마음이나 심리 상태를 단정하지 말고 관찰 가능한 행동을 '~하는 모습을 보임', '~한 것으로 보임'처럼 완곡하게 서술할 것.",
)

_CHARACTER_RANGES: dict[GradeLevel, tuple[int, int]] = {
    GradeLevel.GRADE_1: (600, 650),
    GradeLevel.GRADE_2: (500, 550),
    GradeLevel.GRADE_3: (400, 450),
}

_BYTE_RANGES: dict[GradeLevel, tuple[int, int]] = {
    GradeLevel.GRADE_1: (1450, 1500),
    GradeLevel.GRADE_2: (1300, 1400),
    GradeLevel.GRADE_3: (1000, 1299),
}


@dataclass(frozen=True)
class ConstraintProfile:
    """Target length range and style rules for one request."""

    min_length: int
    max_length: int
    unit: LengthUnit
    style_rules: tuple[str, ...] = STYLE_RULES

    def describe(self) -> str:
        """Human label such as '1450~1500byte' or '공백 포함 600~650자'."""
        if self.unit is LengthUnit.CHARACTERS:
            return f"공백 포함 {self.min_length}~{self.max_length}{self.unit.label}"
        return f"{self.min_length}~{self.max_length}{self.unit.label}"


def derive(grade_level: GradeLevel, record_type: RecordType | None = None) -> ConstraintProfile:
    """Derive the constraint profile for a (grade level, record type) pair."""
    if record_type is None:
        low, high = _CHARACTER_RANGES[grade_level]
        return ConstraintProfile(min_length=low, max_length=high, unit=LengthUnit.CHARACTERS)
    low, high = _BYTE_RANGES[grade_level]
    return ConstraintProfile(min_length=low, max_length=high, unit=LengthUnit.BYTES)
