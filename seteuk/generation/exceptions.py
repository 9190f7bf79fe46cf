class GenerationError(Exception):
    """Base exception for all generation failures."""


class ConfigurationError(GenerationError):
    """Raised when no credential is available for the generation service."""


class UpstreamError(GenerationError):
    """Raised when the generation service call fails."""


class UpstreamAuthError(UpstreamError):
    """Raised when the generation service rejects the credential."""


class UpstreamEmptyResultError(UpstreamError):
    """Raised when the generation service returns no text."""


class ResultDecodeError(GenerationError):
    """Raised when the structured response cannot be decoded into a result."""


class PromptLoadError(GenerationError):
    """Raised when a bundled prompt file cannot be read."""
