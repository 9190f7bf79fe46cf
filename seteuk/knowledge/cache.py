"""Per-category cache of the user's knowledge base files and preferences.

Two stored shapes exist. V1 kept a single file under three keys
(``<prefix>knowledge_base_content|name|mime``); V2 keeps a JSON list of files
under ``<prefix>knowledge_base_files``. Loading prefers V2 and migrates V1
once when V2 is absent.
"""

import json

from seteuk.logging.logger import Log
from seteuk.records.category import RecordCategory
from seteuk.records.codec import uploaded_file_from_dict, uploaded_file_to_dict
from seteuk.records.exceptions import RecordValidationError
from seteuk.records.models import FileCategory, KnowledgeBaseEntry, UploadedFile
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.exceptions import PersistenceCorruptionError, StorageError

LEGACY_DEFAULT_NAME = "사용자 정의 지식 베이스"
LEGACY_DEFAULT_MIME = "application/pdf"


class KnowledgeBaseCache:
    def __init__(self, storage: BaseKeyValueStorage, category: RecordCategory) -> None:
        self._storage = storage
        prefix = category.storage_prefix
        self._files_key = f"{prefix}knowledge_base_files"
        self._legacy_content_key = f"{prefix}knowledge_base_content"
        self._legacy_name_key = f"{prefix}knowledge_base_name"
        self._legacy_mime_key = f"{prefix}knowledge_base_mime"
        self._subject_name_key = f"{prefix}custom_subject_name"
        self._instructions_key = f"{prefix}custom_instructions"

    def load(self) -> list[UploadedFile]:
        """Return the cached files, migrating the legacy single-file shape if needed."""
        try:
            files = self.load_v2()
        except PersistenceCorruptionError as exc:
            Log.error(f"Failed to parse stored knowledge base files: {exc}")
            return []
        except StorageError as exc:
            Log.error("Failed to read knowledge base files", key=self._files_key, error=exc)
            return []
        if files is not None:
            return files

        try:
            legacy = self.load_v1()
        except StorageError as exc:
            Log.error("Failed to read legacy knowledge base", key=self._legacy_content_key, error=exc)
            return []
        if legacy is None:
            return []
        Log.info(f"Migrating legacy knowledge base '{legacy.name}' to {self._files_key}")
        try:
            self.save([legacy])
        except StorageError as exc:
            Log.error("Failed to persist migrated knowledge base", key=self._files_key, error=exc)
        return [legacy]

    def load_v2(self) -> list[UploadedFile] | None:
        """Raises PersistenceCorruptionError when the stored list cannot be decoded."""
        raw = self._storage.get(self._files_key)
        if raw is None:
            return None
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceCorruptionError(f"{self._files_key} is not valid JSON") from exc
        if not isinstance(parsed, list):
            raise PersistenceCorruptionError(f"{self._files_key} must hold a list")
        try:
            return [uploaded_file_from_dict(entry) for entry in parsed]
        except RecordValidationError as exc:
            raise PersistenceCorruptionError(f"{self._files_key}: {exc}") from exc

    def load_v1(self) -> UploadedFile | None:
        content = self._storage.get(self._legacy_content_key)
        if not content:
            return None
        return UploadedFile(
            name=self._storage.get(self._legacy_name_key) or LEGACY_DEFAULT_NAME,
            mime_type=self._storage.get(self._legacy_mime_key) or LEGACY_DEFAULT_MIME,
            data=content,
            category=FileCategory.KNOWLEDGE,
        )

    def save(self, files: list[UploadedFile]) -> None:
        payload = [uploaded_file_to_dict(f) for f in files]
        self._storage.set(self._files_key, json.dumps(payload, ensure_ascii=False))

    def reset(self) -> None:
        """Forget the knowledge base in both shapes along with the custom subject name."""
        for key in (
            self._files_key,
            self._subject_name_key,
            self._legacy_content_key,
            self._legacy_name_key,
            self._legacy_mime_key,
        ):
            self._storage.remove(key)

    def subject_name(self) -> str | None:
        return self._read_preference(self._subject_name_key)

    def save_subject_name(self, name: str | None) -> None:
        if name:
            self._storage.set(self._subject_name_key, name)
        else:
            self._storage.remove(self._subject_name_key)

    def custom_instructions(self) -> str | None:
        return self._read_preference(self._instructions_key)

    def save_custom_instructions(self, instructions: str) -> None:
        self._storage.set(self._instructions_key, instructions)

    def _read_preference(self, key: str) -> str | None:
        try:
            return self._storage.get(key) or None
        except StorageError as exc:
            Log.error("Failed to read preference", key=key, error=exc)
            return None


def as_entries(files: list[UploadedFile]) -> list[KnowledgeBaseEntry]:
    return [KnowledgeBaseEntry(data=f.data, mime_type=f.mime_type) for f in files]
