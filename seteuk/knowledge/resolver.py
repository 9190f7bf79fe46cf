"""Decides which reference material is shown to the generator.

The resolver only assembles content segments. It never generates text.
"""

import asyncio
import base64
import binascii
from pathlib import Path

from seteuk.generation.segments import (
    PDF_MIME_TYPE,
    ContentSegment,
    InlineDataSegment,
    TextSegment,
    is_attachment_mime,
    strip_data_url_prefix,
)
from seteuk.knowledge.base import BaseDocumentStore
from seteuk.knowledge.exceptions import ResourceUnavailableError
from seteuk.knowledge.models import (
    FIXED_DOCUMENTS,
    FixedKnowledgeBase,
    InlineKnowledgeBase,
    KnowledgeSource,
    NoKnowledgeBase,
    select_knowledge_source,
)
from seteuk.knowledge.reference_loader import load_default_corpora
from seteuk.logging.logger import Log
from seteuk.records.models import KnowledgeBaseEntry, RecordType

INLINE_KB_INSTRUCTION = """[지식 베이스: 사용자 정의 참조 자료]
작성 시 이어지는 참조 자료의 내용을 반드시 참고하시오.
단, **성취기준 번호(예: [12정02-04])는 절대 출력물에 포함하지 마십시오.** 내용은 녹여내되 코드는 표기하지 마십시오.
참조 자료의 문체와 평가 방식(구체적 알고리즘 명시, 데이터 출처 언급, 문제해결 과정 서술 등)을 철저히 벤치마킹하여 작성할 것."""

FIXED_KB_INSTRUCTION = """[지식 베이스: 기재 우수 사례 및 기재요령]
이어지는 PDF 자료의 기재 방식과 문체를 철저히 벤치마킹하여 작성하시오.
자료 속 학생의 구체적 활동 내용을 그대로 옮기지 말고, 입력된 학생 정보만 사용하시오."""

DEFAULT_KB_HEADER = """[지식 베이스: 고정 참조 자료]
작성 시 다음의 교육과정 성취기준과 우수 사례를 반드시 참고하시오.
단, **성취기준 번호(예: [12정02-04])는 절대 출력물에 포함하지 마십시오.** 내용은 녹여내되 코드는 표기하지 마십시오.
이 자료에 있는 문체와 평가 방식(구체적 알고리즘 명시, 데이터 출처 언급, 문제해결 과정 서술 등)을 철저히 벤치마킹하여 작성할 것."""


class KnowledgeBaseResolver:
    """Turns a knowledge source into the content segments that open the prompt."""

    def __init__(
        self,
        document_store: BaseDocumentStore,
        reference_dir: Path | None = None,
    ) -> None:
        self._document_store = document_store
        self._reference_dir = reference_dir

    async def resolve(
        self,
        custom_knowledge_base: list[KnowledgeBaseEntry] | None,
        record_type: RecordType | None,
    ) -> list[ContentSegment]:
        return await self.resolve_source(
            select_knowledge_source(custom_knowledge_base, record_type)
        )

    async def resolve_source(self, source: KnowledgeSource) -> list[ContentSegment]:
        if isinstance(source, InlineKnowledgeBase):
            return self._inline_segments(source.entries)
        if isinstance(source, FixedKnowledgeBase):
            return await self._fixed_segments(source.record_type)
        if isinstance(source, NoKnowledgeBase):
            return self._default_segments()
        raise TypeError(f"Unsupported knowledge source: {source!r}")

    async def fetch_entry(self, name: str) -> KnowledgeBaseEntry | None:
        """Fetch one named document as a PDF knowledge base entry, or None if unavailable."""
        segment = await self._fetch_document(name)
        if segment is None:
            return None
        return KnowledgeBaseEntry(data=segment.data, mime_type=segment.mime_type)

    def _inline_segments(self, entries: list[KnowledgeBaseEntry]) -> list[ContentSegment]:
        segments: list[ContentSegment] = [TextSegment(INLINE_KB_INSTRUCTION)]
        segments.extend(_entry_segment(entry) for entry in entries)
        Log.info(f"Using {len(entries)} custom knowledge base entries")
        return segments

    async def _fixed_segments(self, record_type: RecordType) -> list[ContentSegment]:
        names = FIXED_DOCUMENTS[record_type]
        fetched = await asyncio.gather(*(self._fetch_document(name) for name in names))
        attachments = [segment for segment in fetched if segment is not None]
        Log.info(
            "Reference documents loaded",
            record_type=record_type.value,
            loaded=len(attachments),
            requested=len(names),
        )
        if not attachments:
            return []
        return [TextSegment(FIXED_KB_INSTRUCTION), *attachments]

    async def _fetch_document(self, name: str) -> InlineDataSegment | None:
        try:
            raw = await self._document_store.fetch(name)
        except ResourceUnavailableError as exc:
            Log.warning(f"Skipping reference document {name}: {exc}")
            return None
        return InlineDataSegment(
            mime_type=PDF_MIME_TYPE,
            data=base64.b64encode(raw).decode("ascii"),
            name=name,
        )

    def _default_segments(self) -> list[ContentSegment]:
        corpora = "\n\n".join(load_default_corpora(self._reference_dir))
        return [TextSegment(f"{DEFAULT_KB_HEADER}\n\n{corpora}")]


def _entry_segment(entry: KnowledgeBaseEntry) -> ContentSegment:
    # Text knowledge bases (.txt, .md, .json) are embedded as prompt text.
    if is_attachment_mime(entry.mime_type):
        return InlineDataSegment(
            mime_type=entry.mime_type,
            data=strip_data_url_prefix(entry.data),
        )
    return TextSegment(f"[지식 베이스 파일 내용]\n{_entry_text(entry.data)}")


def _entry_text(data: str) -> str:
    header = data.split(",", 1)[0]
    if data.startswith("data:") and header.endswith(";base64"):
        try:
            return base64.b64decode(strip_data_url_prefix(data), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            Log.warning("Knowledge base entry is not decodable base64 text, embedding as-is")
    return data
