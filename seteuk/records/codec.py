"""Conversion between record models and their JSON-compatible dict form.

Field names on the wire are the camelCase names the browser front end has
always stored (``gradeVersion``, ``mimeType``...), so histories and knowledge
base caches written by earlier versions stay readable.
"""

from datetime import date
from typing import Any

from seteuk.records.exceptions import RecordValidationError
from seteuk.records.models import (
    FileCategory,
    GeneratedResult,
    GenerationParams,
    GradeLevel,
    HistoryItem,
    KnowledgeBaseEntry,
    RecordType,
    UploadedFile,
)

_SUMMARY_FIELDS = ("summary500", "summary300", "summary150")


def result_to_dict(result: GeneratedResult) -> dict[str, str]:
    data = {"gradeVersion": result.grade_version}
    for name in _SUMMARY_FIELDS:
        value = getattr(result, name)
        if value is not None:
            data[name] = value
    return data


def result_from_dict(raw: Any) -> GeneratedResult:
    """Build a GeneratedResult from a parsed JSON object.

    Raises:
        RecordValidationError: if gradeVersion is missing or a field has the wrong type.
    """
    if not isinstance(raw, dict):
        raise RecordValidationError("result must be an object")
    grade_version = raw.get("gradeVersion")
    if not isinstance(grade_version, str):
        raise RecordValidationError("'gradeVersion' must be a string")
    summaries: dict[str, str | None] = {}
    for name in _SUMMARY_FIELDS:
        value = raw.get(name)
        if value is not None and not isinstance(value, str):
            raise RecordValidationError(f"'{name}' must be a string or null")
        summaries[name] = value
    return GeneratedResult(grade_version=grade_version, **summaries)


def history_item_to_dict(item: HistoryItem) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": item.id,
        "timestamp": item.timestamp,
        "result": result_to_dict(item.result),
    }
    if item.summary is not None:
        data["summary"] = item.summary
    return data


def history_item_from_dict(raw: Any) -> HistoryItem:
    if not isinstance(raw, dict):
        raise RecordValidationError("history item must be an object")
    item_id = raw.get("id")
    if not isinstance(item_id, str) or not item_id:
        raise RecordValidationError("'id' must be a non-empty string")
    timestamp = raw.get("timestamp")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise RecordValidationError(f"History item {item_id}: 'timestamp' must be an integer")
    summary = raw.get("summary")
    if summary is not None and not isinstance(summary, str):
        raise RecordValidationError(f"History item {item_id}: 'summary' must be a string")
    return HistoryItem(
        id=item_id,
        timestamp=timestamp,
        result=result_from_dict(raw.get("result")),
        summary=summary,
    )


def uploaded_file_to_dict(file: UploadedFile) -> dict[str, str]:
    return {
        "name": file.name,
        "type": file.mime_type,
        "data": file.data,
        "category": file.category.value,
    }


def uploaded_file_from_dict(
    raw: Any, default_category: FileCategory = FileCategory.KNOWLEDGE
) -> UploadedFile:
    if not isinstance(raw, dict):
        raise RecordValidationError("file must be an object")
    for key in ("name", "type", "data"):
        if not isinstance(raw.get(key), str):
            raise RecordValidationError(f"file '{key}' must be a string")
    try:
        category = FileCategory(raw.get("category", default_category.value))
    except ValueError as exc:
        raise RecordValidationError(f"Unknown file category: {raw.get('category')!r}") from exc
    return UploadedFile(
        name=raw["name"],
        mime_type=raw["type"],
        data=raw["data"],
        category=category,
    )


def params_from_dict(raw: dict[str, Any]) -> GenerationParams:
    """Build GenerationParams from a request document (camelCase keys)."""
    try:
        grade_level = GradeLevel(raw.get("gradeLevel", GradeLevel.GRADE_2.value))
    except ValueError as exc:
        raise RecordValidationError(f"Unknown grade level: {raw.get('gradeLevel')!r}") from exc

    record_type = None
    if raw.get("recordType"):
        try:
            record_type = RecordType(raw["recordType"])
        except ValueError as exc:
            raise RecordValidationError(f"Unknown record type: {raw['recordType']!r}") from exc

    knowledge_base = []
    for entry in raw.get("customKnowledgeBase") or []:
        if not isinstance(entry, dict) or not isinstance(entry.get("data"), str):
            raise RecordValidationError("knowledge base entries need a string 'data'")
        knowledge_base.append(
            KnowledgeBaseEntry(
                data=entry["data"],
                mime_type=entry.get("mimeType", "application/pdf"),
            )
        )

    return GenerationParams(
        grade_level=grade_level,
        report_files=[
            uploaded_file_from_dict(f, FileCategory.REPORT)
            for f in raw.get("reportFiles") or []
        ],
        code_files=[
            uploaded_file_from_dict(f, FileCategory.CODE)
            for f in raw.get("codeFiles") or []
        ],
        draft_text=_optional_str(raw, "draftText") or "",
        record_type=record_type,
        custom_knowledge_base=knowledge_base,
        custom_subject_name=_optional_str(raw, "customSubjectName") or None,
        custom_instructions=_optional_str(raw, "customInstructions") or None,
    )


def activity_from_dict(raw: dict[str, Any]) -> tuple[str | None, date | None]:
    """Read the optional dated activity (`activity`, `activityDate` as YYYY-MM-DD)."""
    activity = _optional_str(raw, "activity")
    activity_date = _optional_str(raw, "activityDate")
    if not activity_date:
        return activity or None, None
    try:
        return activity or None, date.fromisoformat(activity_date)
    except ValueError as exc:
        raise RecordValidationError(f"Invalid activityDate: {activity_date!r}") from exc


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise RecordValidationError(f"'{key}' must be a string")
    return value
