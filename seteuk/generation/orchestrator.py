"""Drives one end-to-end generation.

resolve knowledge base -> derive constraints -> compose prompt -> one
structured generation call -> decode. Nothing is retried and the returned
text is not re-measured against the length target; callers that want a
post-call check register a result validator.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from seteuk.constraints.profile import ConstraintProfile, derive
from seteuk.generation.client_base import BaseGenerationClient
from seteuk.generation.composer import PromptComposer
from seteuk.generation.exceptions import ConfigurationError, UpstreamEmptyResultError
from seteuk.generation.prompt_loader import load_revision_template, load_system_instruction
from seteuk.generation.result_parser import build_result_schema, parse_result
from seteuk.generation.segments import ContentSegment, TextSegment
from seteuk.knowledge.resolver import KnowledgeBaseResolver
from seteuk.logging.logger import Log
from seteuk.records.models import GeneratedResult, GenerationParams

ResultValidator = Callable[[GeneratedResult, ConstraintProfile], None]


class GenerationOrchestrator:
    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        resolver: KnowledgeBaseResolver,
        model: str,
        composer: PromptComposer | None = None,
        temperature: float = 0.7,
        system_instruction_path: Path | None = None,
        revision_prompt_path: Path | None = None,
        result_validators: Sequence[ResultValidator] = (),
    ) -> None:
        self._client = client
        self._resolver = resolver
        self._composer = composer if composer is not None else PromptComposer()
        self._model = model
        self._temperature = max(0.0, min(2.0, temperature))
        self._system_instruction = load_system_instruction(system_instruction_path)
        self._revision_template = load_revision_template(revision_prompt_path)
        self._result_validators = tuple(result_validators)

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, params: GenerationParams, credential: str | None) -> GeneratedResult:
        """Generate one record.

        Raises:
            ConfigurationError: if no credential is supplied.
            UpstreamAuthError: if the generation service rejects the credential.
            UpstreamEmptyResultError: if the service returns no text.
            UpstreamError: on any other service failure.
            ResultDecodeError: if the structured payload cannot be decoded.
        """
        credential = _require_credential(credential)

        knowledge_segments = await self._resolver.resolve(
            params.custom_knowledge_base, params.record_type
        )
        profile = derive(params.grade_level, params.record_type)
        segments = self._composer.compose(
            knowledge_segments,
            params.report_files,
            params.code_files,
            params.draft_text,
            profile,
            params.grade_level,
            custom_subject_name=params.custom_subject_name,
            custom_instructions=params.custom_instructions,
        )
        Log.info(
            "Generating record",
            grade=params.grade_level.value,
            target=profile.describe(),
            segments=len(segments),
        )
        Log.debug(f"Final instruction segment:\n{_last_text(segments)}")

        raw = await self._client.generate_structured(
            credential=credential,
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_instruction,
            segments=segments,
            json_schema=build_result_schema(profile),
        )
        if not raw or not raw.strip():
            raise UpstreamEmptyResultError("생성된 결과가 없습니다.")
        Log.debug(f"AI raw response:\n{raw}")

        result = parse_result(raw)
        for validate in self._result_validators:
            validate(result, profile)
        Log.info("Generation complete", chars=len(result.grade_version))
        return result

    async def revise_text(self, text: str, credential: str | None) -> str:
        """Fix spelling and spacing and strip pronouns, standard codes and section headers.

        Returns the input unchanged when the service produces no text.
        """
        credential = _require_credential(credential)
        prompt = self._revision_template.replace("{text}", text)
        try:
            revised = await self._client.generate_text(
                credential=credential,
                model=self._model,
                temperature=0.0,
                segments=[TextSegment(prompt)],
            )
        except UpstreamEmptyResultError:
            Log.warning("Revision returned no text, keeping the original")
            return text
        return revised.strip() or text


def _require_credential(credential: str | None) -> str:
    if not credential or not credential.strip():
        raise ConfigurationError(
            "API 키가 설정되지 않았습니다. API 키를 먼저 입력해주세요."
        )
    return credential.strip()


def _last_text(segments: list[ContentSegment]) -> str:
    for segment in reversed(segments):
        if isinstance(segment, TextSegment):
            return segment.text
    return ""
