import json
from pathlib import Path

from seteuk.logging.logger import Log
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.exceptions import StorageError


class JsonFileStorage(BaseKeyValueStorage):
    """Keeps every key in one JSON object file, rewritten in full on each change."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        self._write(values)

    def remove(self, key: str) -> None:
        values = self._read()
        if values.pop(key, None) is not None:
            self._write(values)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to read {self._path}: {exc}") from exc
        try:
            parsed = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as exc:
            Log.error(f"Storage file {self._path} is not valid JSON, starting empty: {exc}")
            return {}
        if not isinstance(parsed, dict):
            Log.error(f"Storage file {self._path} does not hold an object, starting empty")
            return {}
        return {k: v for k, v in parsed.items() if isinstance(v, str)}

    def _write(self, values: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(values, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Failed to write {self._path}: {exc}") from exc
