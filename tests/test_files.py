from __future__ import annotations

import os
import stat as stat_mod
from pathlib import Path

import pytest

from conftest import Aborted


def test_open_reads_existing_file(m, recorder, tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"hello")

    f = m.open(str(path))
    try:
        assert f.read() == b"hello"
    finally:
        m.close(f)
    assert f.closed
    assert recorder.errors == []


def test_open_missing_file_aborts(m, recorder, tmp_path):
    with pytest.raises(Aborted):
        m.open(str(tmp_path / "missing"))
    assert len(recorder.errors) == 1
    assert isinstance(recorder.errors[0], FileNotFoundError)


def test_create_truncates_and_is_read_write(m, tmp_path):
    path = tmp_path / "out.bin"
    path.write_bytes(b"old content")

    f = m.create(str(path))
    assert m.write(f, b"new") == 3
    assert m.seek(f, 0) == 0
    assert f.read() == b"new"
    m.close(f)
    assert path.read_bytes() == b"new"


def test_create_in_missing_directory_aborts(m, recorder, tmp_path):
    with pytest.raises(Aborted):
        m.create(str(tmp_path / "nope" / "out.bin"))
    assert len(recorder.errors) == 1


def test_open_file_append(m, tmp_path):
    path = tmp_path / "log.txt"
    path.write_bytes(b"a")

    f = m.open_file(str(path), os.O_WRONLY | os.O_APPEND)
    m.write(f, b"b")
    m.close(f)
    assert path.read_bytes() == b"ab"


def test_open_file_exclusive_create_conflict_aborts(m, recorder, tmp_path):
    path = tmp_path / "exists"
    path.write_bytes(b"")

    with pytest.raises(Aborted):
        m.open_file(str(path), os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    assert isinstance(recorder.errors[0], FileExistsError)


@pytest.mark.skipif(os.name != "posix", reason="permission bits are posix-only")
def test_open_file_uses_permissions(m, tmp_path):
    path = tmp_path / "private"
    old_umask = os.umask(0)
    try:
        f = m.open_file(str(path), os.O_RDWR | os.O_CREAT, 0o600)
    finally:
        os.umask(old_umask)
    m.close(f)
    assert stat_mod.S_IMODE(path.stat().st_mode) == 0o600


def test_close_failure_aborts(m, recorder):
    class BadCloser:
        def close(self) -> None:
            raise OSError("close failed")

    with pytest.raises(Aborted):
        m.close(BadCloser())
    assert str(recorder.errors[0]) == "close failed"


def test_seek_whence_and_negative_offset(m, recorder, tmp_path):
    path = tmp_path / "s.bin"
    path.write_bytes(b"0123456789")

    f = m.open(str(path))
    assert m.seek(f, -3, os.SEEK_END) == 7
    assert f.read() == b"789"
    with pytest.raises(Aborted):
        m.seek(f, -1)
    m.close(f)
    assert len(recorder.errors) == 1


def test_stat_and_sync_and_truncate(m, tmp_path):
    path = tmp_path / "t.bin"
    f = m.create(str(path))
    m.write(f, b"abcdef")
    m.sync(f)
    assert m.stat(f).st_size == 6

    m.truncate(f, 2)
    assert m.stat(f).st_size == 2
    m.close(f)
    assert path.read_bytes() == b"ab"


def test_stat_on_closed_file_aborts(m, recorder, tmp_path):
    f = m.create(str(tmp_path / "c.bin"))
    m.close(f)

    with pytest.raises(Aborted):
        m.stat(f)
    with pytest.raises(Aborted):
        m.sync(f)
    assert len(recorder.errors) == 2


def test_stat_path(m, recorder, tmp_path):
    path = tmp_path / "p.bin"
    path.write_bytes(b"1234")

    assert m.stat_path(str(path)).st_size == 4
    with pytest.raises(Aborted):
        m.stat_path(str(tmp_path / "missing"))
    assert len(recorder.errors) == 1


def test_remove_existing_file_returns_none(m, recorder, tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(b"x")

    assert m.remove(str(path)) is None
    assert not path.exists()
    assert recorder.errors == []


def test_remove_missing_path_aborts(m, recorder, tmp_path):
    with pytest.raises(Aborted):
        m.remove(str(tmp_path / "missing"))
    assert isinstance(recorder.errors[0], FileNotFoundError)


def test_remove_empty_directory(m, tmp_path):
    sub = tmp_path / "empty"
    sub.mkdir()

    m.remove(str(sub))
    assert not sub.exists()


def test_remove_non_empty_directory_aborts(m, recorder, tmp_path):
    sub = tmp_path / "full"
    sub.mkdir()
    (sub / "file").write_bytes(b"")

    with pytest.raises(Aborted):
        m.remove(str(sub))
    assert isinstance(recorder.errors[0], OSError)


def test_rename_replaces_target(m, tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.write_bytes(b"new")
    dst.write_bytes(b"old")

    m.rename(str(src), str(dst))
    assert not src.exists()
    assert dst.read_bytes() == b"new"


def test_rename_missing_source_aborts(m, recorder, tmp_path):
    with pytest.raises(Aborted):
        m.rename(str(tmp_path / "missing"), str(tmp_path / "dst"))
    assert len(recorder.errors) == 1


def test_truncate_path(m, tmp_path):
    path = tmp_path / "t.bin"
    path.write_bytes(b"abcdef")

    m.truncate_path(str(path), 3)
    assert path.read_bytes() == b"abc"


def test_temp_file_is_kept_after_close(m, tmp_path):
    f = m.temp_file(str(tmp_path), "job-")
    name = f.name
    assert os.path.basename(name).startswith("job-")
    m.write(f, b"payload")
    m.close(f)
    assert Path(name).read_bytes() == b"payload"


def test_temp_file_in_missing_directory_aborts(m, recorder, tmp_path):
    with pytest.raises(Aborted):
        m.temp_file(str(tmp_path / "missing"))
    assert len(recorder.errors) == 1


def test_temp_dir(m, recorder, tmp_path):
    name = m.temp_dir(str(tmp_path), "work-")
    assert os.path.isdir(name)
    assert os.path.dirname(name) == str(tmp_path)
    assert os.path.basename(name).startswith("work-")

    with pytest.raises(Aborted):
        m.temp_dir(str(tmp_path / "missing"))
    assert len(recorder.errors) == 1


def test_read_dir_sorted_by_name(m, tmp_path):
    for name in ("b", "c", "a"):
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "d").mkdir()

    entries = m.read_dir(str(tmp_path))
    assert [e.name for e in entries] == ["a", "b", "c", "d"]
    assert entries[-1].is_dir()


def test_read_dir_on_file_aborts(m, recorder, tmp_path):
    path = tmp_path / "file"
    path.write_bytes(b"")

    with pytest.raises(Aborted):
        m.read_dir(str(path))
    assert isinstance(recorder.errors[0], NotADirectoryError)
