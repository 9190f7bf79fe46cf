from abc import ABC, abstractmethod

from seteuk.generation.segments import ContentSegment


class BaseGenerationClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
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
        """Return the provider's JSON payload as raw text.

        Raises:
            UpstreamAuthError: if the credential is rejected.
            UpstreamEmptyResultError: if the provider returns no text.
            UpstreamError: on any other provider failure.
        """

    @abstractmethod
    async def generate_text(
        self,
        *,
        credential: str,
        model: str,
        temperature: float,
        segments: list[ContentSegment],
    ) -> str:
        """Return a plain-text completion. Raises like generate_structured."""
