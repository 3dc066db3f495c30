"""Tests for JsonDocumentStore."""

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from coursehub.domain.common.value_objects import CourseId, Progress, UserId
from coursehub.exceptions import DocumentMissingError, MalformedDocumentError, StorageError
from coursehub.infrastructure.storage import JsonDocumentStore


def _rewrite(data_file: Path, change: Callable[[dict[str, Any]], None]) -> None:
    data = json.loads(data_file.read_text(encoding="utf-8"))
    change(data)
    data_file.write_text(json.dumps(data), encoding="utf-8")


class TestLoad:
    """Test suite for reading the document."""

    def test_loads_seed(self, store: JsonDocumentStore) -> None:
        document = store.load()

        assert len(document.users) == 6
        assert len(document.courses) == 4
        assert len(document.certificates) == 3
        assert document.find_user(UserId(5)).progress_in(CourseId(3)).value == 90

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentMissingError) as exc_info:
            JsonDocumentStore(tmp_path / "nope.json").load()
        assert exc_info.value.code == "document_missing"

    def test_invalid_json(self, data_file: Path, store: JsonDocumentStore) -> None:
        data_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            store.load()

    def test_rating_out_of_range(self, data_file: Path, store: JsonDocumentStore) -> None:
        _rewrite(data_file, lambda data: data["cursos"][0]["comentarios"][0].update(nota=7))

        with pytest.raises(MalformedDocumentError) as exc_info:
            store.load()
        assert "nota" in exc_info.value.reason

    def test_missing_top_level_collection(
        self, data_file: Path, store: JsonDocumentStore
    ) -> None:
        _rewrite(data_file, lambda data: data.pop("cursos"))

        with pytest.raises(MalformedDocumentError):
            store.load()

    def test_duplicate_user_ids(self, data_file: Path, store: JsonDocumentStore) -> None:
        _rewrite(data_file, lambda data: data["usuarios"].append(dict(data["usuarios"][0])))

        with pytest.raises(MalformedDocumentError):
            store.load()

    def test_instructor_without_enrollment_keys(self, store: JsonDocumentStore) -> None:
        instructor = store.load().find_user(UserId(3))

        assert instructor.enrolled_course_ids == []
        assert instructor.progress == {}


class TestSave:
    def test_round_trip_keeps_unknown_keys(
        self,
        data_file: Path,
        store: JsonDocumentStore,
        read_stored: Callable[[], dict[str, Any]],
    ) -> None:
        def add_extras(data: dict[str, Any]) -> None:
            data["versao"] = 2
            data["usuarios"][0]["apelido"] = "Aninha"
            data["cursos"][0]["aulas"][0]["video_url"] = "https://example.com/1"

        _rewrite(data_file, add_extras)

        store.save(store.load())

        stored = read_stored()
        assert stored["versao"] == 2
        assert stored["usuarios"][0]["apelido"] == "Aninha"
        assert stored["cursos"][0]["aulas"][0]["video_url"] == "https://example.com/1"

    def test_absent_enrollment_keys_stay_absent(
        self, store: JsonDocumentStore, read_stored: Callable[[], dict[str, Any]]
    ) -> None:
        store.save(store.load())

        users = {user["id"]: user for user in read_stored()["usuarios"]}
        assert users[1]["progresso"] == {"1": 100, "2": 100, "3": 0}
        assert "cursos_matriculados" not in users[3]
        assert "progresso" not in users[3]

    def test_optional_user_keys_keep_their_presence(
        self,
        data_file: Path,
        store: JsonDocumentStore,
        read_stored: Callable[[], dict[str, Any]],
    ) -> None:
        def reshape(data: dict[str, Any]) -> None:
            data["usuarios"][2].update(cursos_matriculados=[], progresso={})
            del data["usuarios"][5]["progresso"]

        _rewrite(data_file, reshape)

        store.save(store.load())

        users = {user["id"]: user for user in read_stored()["usuarios"]}
        assert users[3]["cursos_matriculados"] == []
        assert users[3]["progresso"] == {}
        assert users[6]["cursos_matriculados"] == [2]
        assert "progresso" not in users[6]

    def test_progress_key_added_once_progress_exists(
        self,
        data_file: Path,
        store: JsonDocumentStore,
        read_stored: Callable[[], dict[str, Any]],
    ) -> None:
        _rewrite(data_file, lambda data: data["usuarios"][5].pop("progresso"))

        with store.mutation() as document:
            document.find_user(UserId(6)).record_progress(CourseId(2), Progress(10))

        users = {user["id"]: user for user in read_stored()["usuarios"]}
        assert users[6]["progresso"] == {"2": 10}

    def test_keeps_file_mode(self, data_file: Path, store: JsonDocumentStore) -> None:
        data_file.chmod(0o640)

        store.save(store.load())

        assert data_file.stat().st_mode & 0o777 == 0o640

    def test_failed_replace_keeps_previous_file(
        self, data_file: Path, store: JsonDocumentStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        original = data_file.read_bytes()
        document = store.load()
        document.find_user(UserId(2)).name = "Outro Nome"

        def fail_replace(src: str, dst: str) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", fail_replace)

        with pytest.raises(StorageError):
            store.save(document)

        assert data_file.read_bytes() == original
        assert [path.name for path in data_file.parent.iterdir()] == [data_file.name]


class TestMutation:
    def test_saves_on_success(self, store: JsonDocumentStore) -> None:
        with store.mutation() as document:
            document.find_user(UserId(2)).name = "Bruno L."

        assert store.load().find_user(UserId(2)).name == "Bruno L."

    def test_discards_changes_on_error(self, data_file: Path, store: JsonDocumentStore) -> None:
        original = data_file.read_bytes()

        with pytest.raises(RuntimeError):
            with store.mutation() as document:
                document.find_user(UserId(2)).name = "Bruno L."
                raise RuntimeError("boom")

        assert data_file.read_bytes() == original
