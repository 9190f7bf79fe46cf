from unittest.mock import MagicMock

import pytest

from seteuk.config.settings import Settings
from seteuk.generation.example_client_adapter import ExampleClientAdapter
from seteuk.generation.factory import OrchestratorFactory
from seteuk.generation.openai_client_adapter import OpenAIClientAdapter


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestOrchestratorFactory:
    def test_default_provider_is_gemini(self) -> None:
        orchestrator = OrchestratorFactory.create(_settings(), MagicMock())
        assert orchestrator.model == "gemini-2.5-flash"
        assert isinstance(orchestrator._client, OpenAIClientAdapter)
        assert orchestrator._client._base_url == (
            "https://generativelanguage.googleapis.com/v1beta/openai/"
        )

    def test_example_provider(self) -> None:
        orchestrator = OrchestratorFactory.create(
            _settings(generation_provider="example"), MagicMock()
        )
        assert isinstance(orchestrator._client, ExampleClientAdapter)
        assert orchestrator.model == "example"

    def test_openai_uses_default_base_url(self) -> None:
        orchestrator = OrchestratorFactory.create(
            _settings(generation_provider="OpenAI"), MagicMock()
        )
        assert orchestrator._client._base_url is None
        assert orchestrator.model == "gpt-4o-mini"

    def test_openrouter(self) -> None:
        orchestrator = OrchestratorFactory.create(
            _settings(generation_provider="openrouter"), MagicMock()
        )
        assert orchestrator._client._base_url == "https://openrouter.ai/api/v1"
        assert orchestrator.model == "google/gemini-2.5-flash"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="base_url is required"):
            OrchestratorFactory.create(_settings(generation_provider="openai_compatible"), MagicMock())

    def test_openai_compatible(self) -> None:
        orchestrator = OrchestratorFactory.create(
            _settings(
                generation_provider="openai_compatible",
                generation_openai_compatible_base_url="http://localhost:11434/v1",
                generation_openai_compatible_model_name="llama3",
            ),
            MagicMock(),
        )
        assert orchestrator._client._base_url == "http://localhost:11434/v1"
        assert orchestrator.model == "llama3"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown generation provider"):
            OrchestratorFactory.create(_settings(generation_provider="claude"), MagicMock())
