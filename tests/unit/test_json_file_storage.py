import json
from pathlib import Path
from unittest.mock import patch

import pytest

from seteuk.storage.exceptions import StorageError
from seteuk.storage.json_file_storage import JsonFileStorage


class TestJsonFileStorage:
    def test_missing_file_reads_as_empty(self, tmp_path: Path) -> None:
        assert JsonFileStorage(tmp_path / "store.json").get("history_subject") is None

    def test_set_creates_parent_and_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        storage = JsonFileStorage(path)

        storage.set("gemini_api_key", "k-123")

        assert json.loads(path.read_text(encoding="utf-8")) == {"gemini_api_key": "k-123"}
        assert not path.with_suffix(".json.tmp").exists()

    def test_values_survive_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        JsonFileStorage(path).set("club_custom_subject_name", "코딩 동아리")
        assert JsonFileStorage(path).get("club_custom_subject_name") == "코딩 동아리"

    def test_keeps_other_keys_on_write(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "store.json")
        storage.set("a", "1")
        storage.set("b", "2")
        assert storage.get("a") == "1"
        assert storage.get("b") == "2"

    def test_remove(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "store.json")
        storage.set("a", "1")
        storage.remove("a")
        storage.remove("never-set")
        assert storage.get("a") is None

    def test_corrupt_file_reads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{oops", encoding="utf-8")
        with patch("seteuk.storage.json_file_storage.Log") as mock_log:
            assert JsonFileStorage(path).get("a") is None
        mock_log.error.assert_called_once()

    def test_non_object_file_reads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStorage(path).get("a") is None

    def test_write_failure_raises_storage_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        storage = JsonFileStorage(blocker / "store.json")
        with pytest.raises(StorageError, match="Failed to write"):
            storage.set("a", "1")
