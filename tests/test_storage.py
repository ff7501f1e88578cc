"""Tests for the local storage module."""

import pytest

from bincli.core.errors import LocalFileError
from bincli.core.storage import FileStorage, MemoryStorage


class TestFileStorage:
    """Test the filesystem-backed storage."""

    @pytest.fixture
    def store(self):
        return FileStorage()

    def test_read_json(self, store, tmp_path):
        """Should return the raw bytes of a .json file."""
        path = tmp_path / "data.json"
        path.write_bytes(b'{"bins": []}')
        assert store.read_json(str(path)) == b'{"bins": []}'

    def test_read_json_rejects_other_suffix(self, store, tmp_path):
        """Non-.json paths are rejected even when the file exists."""
        path = tmp_path / "data.txt"
        path.write_text("{}")
        with pytest.raises(LocalFileError) as exc:
            store.read_json(str(path))
        assert "isn't a valid json file" in exc.value.message
        assert exc.value.path == str(path)

    def test_read_json_missing_file(self, store, tmp_path):
        with pytest.raises(LocalFileError):
            store.read_json(str(tmp_path / "missing.json"))

    def test_read_plain(self, store, tmp_path):
        path = tmp_path / "saved.txt"
        path.write_text("abc\n")
        assert store.read_plain(str(path)) == b"abc\n"

    def test_write_truncates(self, store, tmp_path):
        path = tmp_path / "out.json"
        store.write(b"first version", str(path))
        store.write(b"second", str(path))
        assert path.read_bytes() == b"second"

    def test_append_creates_and_appends(self, store, tmp_path):
        """Append should create the file, then add to the end."""
        path = tmp_path / "saved.txt"
        store.append(b"one\n", str(path))
        store.append(b"two\n", str(path))
        assert path.read_text() == "one\ntwo\n"

    def test_append_to_directory_fails(self, store, tmp_path):
        with pytest.raises(LocalFileError):
            store.append(b"x", str(tmp_path))

    def test_exists(self, store, tmp_path):
        path = tmp_path / "saved.txt"
        assert not store.exists(str(path))
        path.write_text("")
        assert store.exists(str(path))
        assert not store.exists(str(tmp_path))


class TestMemoryStorage:
    """The in-memory storage should behave like the file one."""

    def test_roundtrip(self):
        store = MemoryStorage()
        store.write(b"{}", "a.json")
        store.append(b"x\n", "ids.txt")
        store.append(b"y\n", "ids.txt")

        assert store.read_json("a.json") == b"{}"
        assert store.read_plain("ids.txt") == b"x\ny\n"

    def test_missing_file(self):
        with pytest.raises(LocalFileError):
            MemoryStorage().read_plain("nope.txt")

    def test_suffix_check(self):
        store = MemoryStorage({"a.txt": b"{}"})
        with pytest.raises(LocalFileError):
            store.read_json("a.txt")

    def test_initial_files_are_copied(self):
        files = {"a.json": b"{}"}
        store = MemoryStorage(files)
        store.write(b"[]", "a.json")
        assert files["a.json"] == b"{}"
