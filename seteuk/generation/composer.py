"""Assembles the ordered content segments of one generation request.

Order is fixed: knowledge base, report files, code files, then the final
instruction segment. The generator treats earlier segments as background and
the last one as the instruction, so the constraint checklist always comes last.
"""

from datetime import date

from seteuk.constraints.profile import ConstraintProfile, LengthUnit
from seteuk.generation.segments import (
    ContentSegment,
    InlineDataSegment,
    TextSegment,
    is_attachment_mime,
    strip_data_url_prefix,
)
from seteuk.records.models import GradeLevel, UploadedFile

NO_DRAFT_MARKER = "(없음. 보고서와 코드를 바탕으로 새로 작성)"


def stamp_activity_draft(activity: str, on_date: date, draft_text: str = "") -> str:
    """Prefix a draft with a dated activity the text must open with.

    The date stamp is the one parenthetical the style rules allow.
    """
    stamp = f"{on_date.year}.{on_date.month:02d}.{on_date.day:02d}."
    activity = activity.strip()
    return (
        "[필수 포함 조건]\n"
        f'문장을 시작할 때 반드시 다음 형식을 정확히 지켜서 작성하시오: "{activity}({stamp})을 통해~"\n\n'
        "[활동 정보]\n"
        f"날짜: {stamp}\n"
        f"활동 내용: {activity}\n\n"
        f"{draft_text}"
    )


class PromptComposer:
    def compose(
        self,
        knowledge_segments: list[ContentSegment],
        report_files: list[UploadedFile],
        code_files: list[UploadedFile],
        draft_text: str,
        profile: ConstraintProfile,
        grade_level: GradeLevel,
        custom_subject_name: str | None = None,
        custom_instructions: str | None = None,
    ) -> list[ContentSegment]:
        segments: list[ContentSegment] = list(knowledge_segments)
        segments.extend(self._report_segment(f) for f in report_files)
        segments.extend(
            TextSegment(f"[학생 코드 파일 내용: {f.name}]\n{f.data}") for f in code_files
        )
        segments.append(
            TextSegment(
                self._instruction_text(
                    draft_text,
                    profile,
                    grade_level,
                    custom_subject_name,
                    custom_instructions,
                )
            )
        )
        return segments

    @staticmethod
    def _report_segment(file: UploadedFile) -> ContentSegment:
        if is_attachment_mime(file.mime_type):
            return InlineDataSegment(
                mime_type=file.mime_type,
                data=strip_data_url_prefix(file.data),
                name=file.name,
            )
        return TextSegment(f"[학생 보고서 파일 내용: {file.name}]\n{file.data}")

    @staticmethod
    def _instruction_text(
        draft_text: str,
        profile: ConstraintProfile,
        grade_level: GradeLevel,
        custom_subject_name: str | None,
        custom_instructions: str | None,
    ) -> str:
        fields = [f"희망 등급: {grade_level.value}"]
        if custom_subject_name:
            fields.append(f"과목/활동명: {custom_subject_name}")
        fields.append(f"초안 및 메모:\n{draft_text.strip() or NO_DRAFT_MARKER}")
        lines = ["[사용자 입력 정보]"]
        lines.extend(f"{number}. {field}" for number, field in enumerate(fields, start=1))

        if custom_instructions and custom_instructions.strip():
            lines.extend(["", "[추가 요청 사항]", custom_instructions.strip()])

        lines.extend(["", "[분량 조건]", _length_rule(profile)])

        lines.extend(
            [
                "",
                "[★★최종 생성 전 필수 검증(Sanity Check)★★]",
                "텍스트를 생성하기 직전에 다음 규칙을 하나씩 확인하고 어긋난 부분을 스스로 수정하시오:",
            ]
        )
        checklist = [*profile.style_rules, _length_rule(profile)]
        lines.extend(f"{number}. {rule}" for number, rule in enumerate(checklist, start=1))
        lines.extend(["", "위 규칙을 완벽히 지킨 최종 결과만 JSON으로 출력하시오."])
        return "\n".join(lines)


def _length_rule(profile: ConstraintProfile) -> str:
    if profile.unit is LengthUnit.BYTES:
        return (
            f"🚨 분량은 {profile.min_length}~{profile.max_length}byte로 맞출 것. "
            "한글 한 글자는 3byte, 숫자·영문·공백·문장부호·줄바꿈은 1byte로 계산함."
        )
    return (
        f"🚨 공백 포함 {profile.min_length}~{profile.max_length}자로 맞추고 "
        f"{profile.max_length}자를 절대 넘기지 말 것. "
        "넘칠 것 같으면 부사와 형용사를 과감히 삭제하여 길이를 줄일 것."
    )
