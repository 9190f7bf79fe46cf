from typing import Any

import httpx
import openai

from seteuk.generation.client_base import BaseGenerationClient
from seteuk.generation.exceptions import (
    UpstreamAuthError,
    UpstreamEmptyResultError,
    UpstreamError,
)
from seteuk.generation.segments import ContentSegment, InlineDataSegment, TextSegment


def to_content_part(segment: ContentSegment) -> dict[str, Any]:
    """Render one segment as an OpenAI chat content part."""
    if isinstance(segment, TextSegment):
        return {"type": "text", "text": segment.text}
    data_url = f"data:{segment.mime_type};base64,{segment.data}"
    if segment.is_image:
        return {"type": "image_url", "image_url": {"url": data_url}}
    return {
        "type": "file",
        "file": {"filename": segment.name or _default_filename(segment), "file_data": data_url},
    }


def _default_filename(segment: InlineDataSegment) -> str:
    subtype = segment.mime_type.rsplit("/", 1)[-1] or "bin"
    return f"attachment.{subtype}"


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client built on the OpenAI-compatible chat completions API.

    A client is created per call because the credential belongs to the caller,
    not to the process.
    """

    def __init__(self, *, base_url: str | None = None) -> None:
        self._base_url = base_url

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
        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append(
            {"role": "user", "content": [to_content_part(s) for s in segments]}
        )
        return await self._complete(
            credential,
            model=model,
            temperature=temperature,
            messages=messages,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "generated_result",
                    "strict": True,
                    "schema": json_schema,
                },
            },
        )

    async def generate_text(
        self,
        *,
        credential: str,
        model: str,
        temperature: float,
        segments: list[ContentSegment],
    ) -> str:
        return await self._complete(
            credential,
            model=model,
            temperature=temperature,
            messages=[
                {"role": "user", "content": [to_content_part(s) for s in segments]}
            ],
        )

    async def _complete(self, credential: str, **request: Any) -> str:
        client = openai.AsyncOpenAI(api_key=credential, base_url=self._base_url)
        try:
            response = await client.chat.completions.create(**request)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise UpstreamAuthError(f"Credential rejected: {exc}") from exc
        except openai.BadRequestError as exc:
            # Gemini reports a bad key as HTTP 400 "API key not valid".
            if "api key" in str(exc).lower():
                raise UpstreamAuthError(f"Credential rejected: {exc}") from exc
            raise UpstreamError(f"AI provider API error: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UpstreamError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise UpstreamError(f"AI provider API error: {exc}") from exc
        finally:
            await client.close()

        if not response.choices:
            raise UpstreamEmptyResultError("AI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise UpstreamEmptyResultError("AI returned empty response")
        return content
