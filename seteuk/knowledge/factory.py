from typing import ClassVar

from seteuk.config.settings import Settings
from seteuk.knowledge.base import BaseDocumentStore
from seteuk.knowledge.httpx_document_store import HttpxDocumentStore
from seteuk.knowledge.local_document_store import LocalDocumentStore


class DocumentStoreFactory:
    """Creates the configured reference document store."""

    STORES: ClassVar[tuple[str, ...]] = ("http", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentStore:
        store = settings.document_store.lower()
        if store == "http":
            return HttpxDocumentStore(settings.document_base_url)
        if store == "local":
            return LocalDocumentStore(settings.documents_root)
        raise ValueError(
            f"Unknown document store '{store}'. Choose from: {list(cls.STORES)}"
        )
