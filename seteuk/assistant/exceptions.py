class AssistantError(Exception):
    """Base exception for record assistant errors."""


class NoCurrentResultError(AssistantError):
    """Raised when an edit is saved before any result was generated or restored."""


class EmptyInputError(AssistantError):
    """Raised when a request carries no report, code, draft or activity."""
