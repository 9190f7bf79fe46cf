import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from seteuk.records.models import (
    FileCategory,
    GenerationParams,
    GradeLevel,
    UploadedFile,
)
from seteuk.storage.memory_storage import MemoryStorage


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF standing in for a reference document."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Club activity exemplar")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def report_text_file() -> UploadedFile:
    return UploadedFile(
        name="report.txt",
        mime_type="text/plain",
        data="정렬 알고리즘 비교 보고서",
        category=FileCategory.REPORT,
    )


@pytest.fixture()
def code_file() -> UploadedFile:
    return UploadedFile(
        name="sort.py",
        mime_type="text/x-python",
        data="def bubble(xs):\n    return sorted(xs)\n",
        category=FileCategory.CODE,
    )


@pytest.fixture()
def subject_params() -> GenerationParams:
    return GenerationParams(
        grade_level=GradeLevel.GRADE_1,
        draft_text="학생은 팀 프로젝트에서 리더 역할을 수행함",
    )
