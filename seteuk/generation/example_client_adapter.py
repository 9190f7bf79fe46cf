"""Example generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in OrchestratorFactory.
"""

import json
from typing import ClassVar

from seteuk.generation.client_base import BaseGenerationClient
from seteuk.generation.segments import ContentSegment, TextSegment


class ExampleClientAdapter(BaseGenerationClient):
    """Returns a fixed record without any network call.

    Useful for local development of the presentation layer.
    """

    DEFAULT_RESULT: ClassVar[dict[str, str]] = {
        "gradeVersion": (
            "팀 프로젝트에서 역할 분담표를 만들어 구성원의 강점에 맞게 업무를 배분하고 "
            "진행 상황을 주기적으로 점검하며 일정 지연 문제를 해결하는 모습을 보임."
        ),
    }

    async def generate_structured(
        self,
        *,
        credential: str,
        model: str,
        temperature: float,
        system_prompt: str,
        segments: list[ContentSegment],
        json_schema: dict[str, object],
    ) -> str:
        _ = credential, model, temperature, system_prompt, segments, json_schema
        return json.dumps(self.DEFAULT_RESULT, ensure_ascii=False)

    async def generate_text(
        self,
        *,
        credential: str,
        model: str,
        temperature: float,
        segments: list[ContentSegment],
    ) -> str:
        _ = credential, model, temperature
        texts = [s.text for s in segments if isinstance(s, TextSegment)]
        return texts[-1].rsplit("\n\n", 1)[-1] if texts else ""
