class StorageError(Exception):
    """Raised when the durable keyed storage cannot be read or written."""


class PersistenceCorruptionError(StorageError):
    """Raised when a stored value cannot be decoded."""
