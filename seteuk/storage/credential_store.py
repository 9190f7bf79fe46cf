from seteuk.logging.logger import Log
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.exceptions import StorageError

CREDENTIAL_KEY = "gemini_api_key"


class CredentialStore:
    """Keeps the generation API key under a single storage key.

    The key is stored as-is. Protecting it is up to the storage backend.
    """

    def __init__(self, storage: BaseKeyValueStorage, key: str = CREDENTIAL_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> str | None:
        """Return the stored key. An unreadable store counts as no key."""
        try:
            value = self._storage.get(self._key)
        except StorageError as exc:
            Log.error("Failed to read credential", key=self._key, error=exc)
            return None
        return value.strip() if value and value.strip() else None

    def save(self, credential: str) -> None:
        self._storage.set(self._key, credential.strip())

    def clear(self) -> None:
        self._storage.remove(self._key)
