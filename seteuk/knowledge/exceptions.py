class KnowledgeBaseError(Exception):
    """Base exception for knowledge base errors."""


class ResourceUnavailableError(KnowledgeBaseError):
    """Raised when a fixed reference document cannot be fetched."""


class ReferenceLoadError(KnowledgeBaseError):
    """Raised when a bundled reference corpus cannot be read."""
