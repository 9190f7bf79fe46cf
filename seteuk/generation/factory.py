from typing import ClassVar

from seteuk.config.settings import Settings
from seteuk.generation.client_base import BaseGenerationClient
from seteuk.generation.example_client_adapter import ExampleClientAdapter
from seteuk.generation.openai_client_adapter import OpenAIClientAdapter
from seteuk.generation.orchestrator import GenerationOrchestrator
from seteuk.knowledge.resolver import KnowledgeBaseResolver


class OrchestratorFactory:
    """Creates a generation orchestrator for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
    }

    @classmethod
    def create(cls, settings: Settings, resolver: KnowledgeBaseResolver) -> GenerationOrchestrator:
        provider = settings.generation_provider.lower()
        return GenerationOrchestrator(
            client=cls._create_client(provider, settings),
            resolver=resolver,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.generation_temperature,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseGenerationClient:
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(base_url=cls._resolve_base_url(provider, settings))

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.generation_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "generation_openai_compatible_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "example": "example",
            "gemini": settings.generation_gemini_model_name,
            "openai": settings.generation_openai_model_name,
            "openrouter": settings.generation_openrouter_model_name,
            "openai_compatible": settings.generation_openai_compatible_model_name,
        }
        return key_map.get(provider, "") or ""
