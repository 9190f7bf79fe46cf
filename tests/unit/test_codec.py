from datetime import date

import pytest

from seteuk.records.codec import (
    activity_from_dict,
    history_item_from_dict,
    history_item_to_dict,
    params_from_dict,
    result_from_dict,
    result_to_dict,
    uploaded_file_from_dict,
)
from seteuk.records.exceptions import RecordValidationError
from seteuk.records.models import (
    FileCategory,
    GeneratedResult,
    GradeLevel,
    HistoryItem,
    KnowledgeBaseEntry,
    RecordType,
)


class TestResultCodec:
    def test_omits_missing_summaries(self) -> None:
        assert result_to_dict(GeneratedResult(grade_version="본문")) == {"gradeVersion": "본문"}

    def test_reads_summaries(self) -> None:
        result = result_from_dict({"gradeVersion": "본문", "summary150": "요약", "summary300": None})
        assert result == GeneratedResult(grade_version="본문", summary150="요약")

    def test_missing_grade_version_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="gradeVersion"):
            result_from_dict({"summary500": "요약"})

    def test_wrong_summary_type_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="summary500"):
            result_from_dict({"gradeVersion": "본문", "summary500": 3})


class TestHistoryItemCodec:
    def test_wire_shape(self) -> None:
        item = HistoryItem(
            id="1700000000000",
            timestamp=1700000000000,
            result=GeneratedResult(grade_version="본문"),
            summary="교과세특 - 1등급",
        )
        assert history_item_to_dict(item) == {
            "id": "1700000000000",
            "timestamp": 1700000000000,
            "result": {"gradeVersion": "본문"},
            "summary": "교과세특 - 1등급",
        }
        assert history_item_from_dict(history_item_to_dict(item)) == item

    def test_boolean_timestamp_rejected(self) -> None:
        with pytest.raises(RecordValidationError, match="timestamp"):
            history_item_from_dict({"id": "1", "timestamp": True, "result": {"gradeVersion": "x"}})

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(RecordValidationError, match="id"):
            history_item_from_dict({"id": "", "timestamp": 1, "result": {"gradeVersion": "x"}})


class TestUploadedFileCodec:
    def test_unknown_category_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="category"):
            uploaded_file_from_dict({"name": "a", "type": "text/plain", "data": "x", "category": "misc"})

    def test_missing_data_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="data"):
            uploaded_file_from_dict({"name": "a", "type": "text/plain"})


class TestParamsFromDict:
    def test_full_request(self) -> None:
        params = params_from_dict(
            {
                "gradeLevel": "1등급",
                "recordType": "동아리",
                "draftText": "회의 진행",
                "reportFiles": [{"name": "r.txt", "type": "text/plain", "data": "보고서"}],
                "codeFiles": [{"name": "a.py", "type": "text/x-python", "data": "print(1)"}],
                "customKnowledgeBase": [{"data": "QUJD", "mimeType": "text/plain"}],
                "customSubjectName": "코딩 동아리",
                "customInstructions": "협업 강조",
            }
        )
        assert params.grade_level is GradeLevel.GRADE_1
        assert params.record_type is RecordType.CLUB
        assert params.draft_text == "회의 진행"
        assert params.report_files[0].category is FileCategory.REPORT
        assert params.code_files[0].category is FileCategory.CODE
        assert params.custom_knowledge_base == [KnowledgeBaseEntry(data="QUJD", mime_type="text/plain")]
        assert params.custom_subject_name == "코딩 동아리"
        assert params.custom_instructions == "협업 강조"

    def test_defaults(self) -> None:
        params = params_from_dict({})
        assert params.grade_level is GradeLevel.GRADE_2
        assert params.record_type is None
        assert params.report_files == []
        assert params.custom_subject_name is None

    def test_knowledge_base_mime_defaults_to_pdf(self) -> None:
        params = params_from_dict({"customKnowledgeBase": [{"data": "QUJD"}]})
        assert params.custom_knowledge_base[0].mime_type == "application/pdf"

    def test_unknown_grade_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="grade"):
            params_from_dict({"gradeLevel": "4등급"})

    def test_unknown_record_type_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="record type"):
            params_from_dict({"recordType": "봉사"})

    @pytest.mark.parametrize("key", ["draftText", "customSubjectName", "customInstructions"])
    def test_non_string_text_fields_raise(self, key: str) -> None:
        with pytest.raises(RecordValidationError, match=key):
            params_from_dict({key: ["발표함"]})


class TestActivityFromDict:
    def test_reads_activity_and_date(self) -> None:
        assert activity_from_dict({"activity": "학급 회의", "activityDate": "2025-03-04"}) == (
            "학급 회의",
            date(2025, 3, 4),
        )

    def test_absent_fields(self) -> None:
        assert activity_from_dict({}) == (None, None)

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="activityDate"):
            activity_from_dict({"activity": "학급 회의", "activityDate": "3월 4일"})
