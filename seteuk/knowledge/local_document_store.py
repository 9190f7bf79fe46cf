from pathlib import Path

from seteuk.knowledge.base import BaseDocumentStore
from seteuk.knowledge.exceptions import ResourceUnavailableError


class LocalDocumentStore(BaseDocumentStore):
    """Reads reference documents from a directory on disk."""

    DOCUMENTS_ROOT = Path("public")

    def __init__(self, documents_root: Path | None = None) -> None:
        self._documents_root = (
            documents_root if documents_root is not None else self.DOCUMENTS_ROOT
        )

    async def fetch(self, name: str) -> bytes:
        path = self._resolve_path(name)
        if not path.is_file():
            raise ResourceUnavailableError(f"Document not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ResourceUnavailableError(f"Failed to read {path}: {exc}") from exc

    def _resolve_path(self, name: str) -> Path:
        root = self._documents_root.resolve()
        path = (root / name).resolve()
        if not path.is_relative_to(root):
            raise ResourceUnavailableError(f"Document name escapes the store: {name}")
        return path
