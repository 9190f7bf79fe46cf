class RecordError(Exception):
    """Base exception for record model errors."""


class RecordValidationError(RecordError):
    """Raised when a serialized record does not match the expected shape."""
