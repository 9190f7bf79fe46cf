"""Decodes the generator's structured payload into a GeneratedResult."""

import json

from seteuk.constraints.profile import ConstraintProfile
from seteuk.generation.exceptions import ResultDecodeError
from seteuk.records.codec import result_from_dict
from seteuk.records.exceptions import RecordValidationError
from seteuk.records.models import GeneratedResult


def build_result_schema(profile: ConstraintProfile) -> dict[str, object]:
    """JSON schema requested from the generator. The description repeats the length target."""
    return {
        "type": "object",
        "properties": {
            "gradeVersion": {
                "type": "string",
                "description": (
                    f"{profile.describe()}로 작성된 버전 "
                    f"({profile.max_length}{profile.unit.label}를 절대 넘지 말 것, "
                    "학생 이름, 성취기준 번호, 섹션 헤더, 괄호, 불필요한 따옴표 절대 미포함)"
                ),
            },
        },
        "required": ["gradeVersion"],
        "additionalProperties": False,
    }


def parse_result(raw: str) -> GeneratedResult:
    """Decode a JSON payload, tolerating markdown code fences.

    Raises:
        ResultDecodeError: if the payload is not a JSON object with a string gradeVersion.
    """
    cleaned = _strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ResultDecodeError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ResultDecodeError("JSON response must be an object")
    try:
        return result_from_dict(parsed)
    except RecordValidationError as exc:
        raise ResultDecodeError(f"Invalid result: {exc}") from exc


def _strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if not cleaned.startswith("```"):
        return cleaned
    lines = cleaned.splitlines()
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)
