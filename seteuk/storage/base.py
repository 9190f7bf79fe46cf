from abc import ABC, abstractmethod


class BaseKeyValueStorage(ABC):
    """Contract for durable keyed string storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent.

        Raises:
            StorageError: if the backend cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            StorageError: if the backend cannot be written.
        """

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is not an error.

        Raises:
            StorageError: if the backend cannot be written.
        """
