"""walk() のテスト"""
import pytest

from conftest import MemoryFileSystem
from s3_static_uploader.core.walker import walk


class Recorder:
    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, path, entry, error):
        self.calls.append((path, entry.is_dir if entry else None, error))
        if error is not None:
            raise error
        if path == self.fail_on:
            raise RuntimeError(f"stop at {path}")


def test_walk_visits_every_entry_in_lexical_order():
    fs = MemoryFileSystem({
        "foo.txt": b"",
        "app/index.js": b"",
        "app/css/site.css": b"",
        "b.txt": b"",
    })
    recorder = Recorder()

    walk(fs, recorder)

    assert [(path, is_dir) for path, is_dir, _ in recorder.calls] == [
        (".", True),
        ("app", True),
        ("app/css", True),
        ("app/css/site.css", False),
        ("app/index.js", False),
        ("b.txt", False),
        ("foo.txt", False),
    ]


def test_walk_stops_on_first_callback_error():
    fs = MemoryFileSystem({"a.txt": b"", "b.txt": b"", "c.txt": b""})
    recorder = Recorder(fail_on="b.txt")

    with pytest.raises(RuntimeError, match="stop at b.txt"):
        walk(fs, recorder)

    assert [path for path, _, _ in recorder.calls] == [".", "a.txt", "b.txt"]


def test_walk_reports_root_stat_error():
    error = PermissionError("denied")
    fs = MemoryFileSystem(broken={".": error})
    calls = []

    walk(fs, lambda path, entry, err: calls.append((path, entry, err)))

    assert calls == [(".", None, error)]


def test_walk_reports_list_dir_error_after_directory():
    error = PermissionError("denied")
    fs = MemoryFileSystem({"secret/key.txt": b""})
    calls = []

    original_list_dir = fs.list_dir

    def list_dir(path):
        if path == "secret":
            raise error
        return original_list_dir(path)

    fs.list_dir = list_dir
    walk(fs, lambda path, entry, err: calls.append((path, entry.is_dir, err)))

    assert calls == [
        (".", True, None),
        ("secret", True, None),
        ("secret", True, error),
    ]
