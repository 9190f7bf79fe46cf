from typing import ClassVar

from seteuk.config.settings import Settings
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.connection import init_pool
from seteuk.storage.json_file_storage import JsonFileStorage
from seteuk.storage.memory_storage import MemoryStorage
from seteuk.storage.postgres_storage import PostgresStorage


class StorageFactory:
    """Creates the configured keyed storage backend."""

    BACKENDS: ClassVar[tuple[str, ...]] = ("memory", "file", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseKeyValueStorage:
        backend = settings.storage_backend.lower()
        if backend == "memory":
            return MemoryStorage()
        if backend == "file":
            return JsonFileStorage(settings.storage_file_path)
        if backend == "postgres":
            init_pool(settings)
            storage = PostgresStorage()
            storage.ensure_schema()
            return storage
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
