import datetime
import gzip
import os
import time

import pytest

from taurus.tlog.writer import LogWriter


def _yesterday() -> str:
    return (datetime.date.today() - datetime.timedelta(days=1)).isoformat()


def test_rotate_by_date(tmp_path):
    log_file = tmp_path / "test-date.log"
    with LogWriter(log_file, 10, 3, 7, 1) as writer:
        assert writer.write(b"first line\n") == len(b"first line\n")
        old_date = _yesterday()
        writer.current_date = old_date
        writer.write(b"second line\n")

        backups = list(tmp_path.glob("test-date.log.*.gz"))
        assert [b.name for b in backups] == [f"test-date.log.{old_date}.gz"]
        with gzip.open(backups[0], "rb") as handle:
            assert handle.read() == b"first line\n"
        assert log_file.read_bytes() == b"second line\n"
        assert writer.current_date == datetime.date.today().isoformat()


def test_rotate_by_size(tmp_path):
    log_file = tmp_path / "test-size.log"
    with LogWriter(log_file, 0, 3, 7, 1) as writer:
        assert writer.max_size == 0
        writer.max_size = 10
        line = b"this line should trigger rotation\n"
        writer.write(line)

        backups = list(tmp_path.glob("test-size.log.*.gz"))
        assert len(backups) == 1
        with gzip.open(backups[0], "rb") as handle:
            assert handle.read() == line
        assert log_file.read_bytes() == b""
        assert writer.size == 0


def test_max_size_in_megabytes(tmp_path):
    with LogWriter(tmp_path / "mb.log", 2) as writer:
        assert writer.max_size == 2 * 1024 * 1024


def test_no_rotation_when_small(tmp_path):
    log_file = tmp_path / "small.log"
    with LogWriter(log_file, 1, 3, 7, 1) as writer:
        writer.write("hello\n")
        writer.write("world\n")
        assert writer.size == 12
    assert log_file.read_text() == "hello\nworld\n"
    assert list(tmp_path.glob("small.log.*.gz")) == []


def test_date_rotation_disabled(tmp_path):
    log_file = tmp_path / "nodate.log"
    with LogWriter(log_file, 0, 0, 0, 0) as writer:
        writer.write(b"a\n")
        writer.current_date = _yesterday()
        writer.write(b"b\n")
    assert list(tmp_path.glob("nodate.log.*.gz")) == []
    assert log_file.read_bytes() == b"a\nb\n"


def test_existing_file_size_is_counted(tmp_path):
    log_file = tmp_path / "existing.log"
    log_file.write_bytes(b"12345")
    with LogWriter(log_file) as writer:
        assert writer.size == 5
        writer.write(b"678")
    assert log_file.read_bytes() == b"12345678"


def test_recreates_deleted_file(tmp_path):
    log_file = tmp_path / "sub" / "gone.log"
    with LogWriter(log_file) as writer:
        writer.write(b"before\n")
        os.remove(log_file)
        writer.write(b"after\n")
        assert writer.size == len(b"after\n")
    assert log_file.read_bytes() == b"after\n"


def test_cleanup_keeps_max_backups(tmp_path):
    log_file = tmp_path / "keep.log"
    for day in ("2000-01-01", "2000-01-02", "2000-01-03"):
        (tmp_path / f"keep.log.{day}.gz").write_bytes(b"")
    with LogWriter(log_file, 0, 2, 0, 1) as writer:
        assert writer.write(b"data\n") == 5
        writer.rotate()
        assert writer.size == 0
    remaining = sorted(p.name for p in tmp_path.glob("keep.log.*.gz"))
    today = datetime.date.today().isoformat()
    assert remaining == sorted(["keep.log.2000-01-03.gz", f"keep.log.{today}.gz"])


def test_cleanup_removes_old_backups(tmp_path):
    log_file = tmp_path / "age.log"
    old = tmp_path / "age.log.1999-01-01.gz"
    old.write_bytes(b"")
    stale = time.time() - 30 * 24 * 60 * 60
    os.utime(old, (stale, stale))
    with LogWriter(log_file, 0, 0, 7, 1) as writer:
        assert writer.write(b"x\n") == 2
        writer.rotate()
        assert writer.size == 0
    assert not old.exists()
    assert len(list(tmp_path.glob("age.log.*.gz"))) == 1


def test_write_after_close_fails(tmp_path):
    writer = LogWriter(tmp_path / "closed.log")
    writer.close()
    with pytest.raises(ValueError):
        writer.write(b"late\n")