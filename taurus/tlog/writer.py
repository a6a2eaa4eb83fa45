"""A log file writer with size and date based rotation, compression and cleanup."""

from __future__ import annotations

import contextlib
import datetime
import gzip
import os
import shutil
import time
from types import TracebackType

_BYTES_PER_MB = 1024 * 1024
_SECONDS_PER_DAY = 24 * 60 * 60


def _today() -> str:
    return datetime.date.today().isoformat()


class LogWriter:
    """Append to a log file, rotating it into ``<file>.<date>.gz`` backups.

    ``max_size`` is given in megabytes and stored in bytes; 0 disables size rotation.
    ``max_backups`` and ``max_age`` (days) limit kept backups; 0 means no limit.
    ``max_days`` is the number of days between date rotations; 0 or less disables them.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        max_size: int = 0,
        max_backups: int = 0,
        max_age: int = 0,
        max_days: int = 1,
    ) -> None:
        self.filename = os.fspath(filename)
        self.max_size = max_size * _BYTES_PER_MB
        self.max_backups = max_backups
        self.max_age = max_age
        self.max_days = max_days
        self.size = 0
        self.current_date = _today()
        self._file = None
        self._open()

    def _open(self) -> None:
        os.makedirs(os.path.dirname(self.filename) or ".", exist_ok=True)
        try:
            info = os.stat(self.filename)
        except FileNotFoundError:
            pass
        else:
            self.size = info.st_size
            self.current_date = datetime.date.fromtimestamp(info.st_mtime).isoformat()
        self._file = open(self.filename, "ab")

    def write(self, data: bytes | str) -> int:
        """Write ``data`` to the log file, rotating first by date and afterwards by size."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not os.path.exists(self.filename):
            self.close()
            self._open()
            self.size = 0

        if self._should_rotate_by_date():
            self.rotate()

        written = self._file.write(data)
        self._file.flush()
        self.size += written

        if self._should_rotate_by_size():
            self.rotate()
        return written

    def _should_rotate_by_size(self) -> bool:
        return self.max_size > 0 and self.size > self.max_size

    def _should_rotate_by_date(self) -> bool:
        if self.max_days <= 0:
            return False
        today = _today()
        if today == self.current_date:
            return False
        try:
            now_date = datetime.date.fromisoformat(today)
            file_date = datetime.date.fromisoformat(self.current_date)
        except ValueError:
            return False
        return (now_date - file_date).days >= self.max_days

    def rotate(self) -> None:
        """Compress the current file into a dated backup, empty it and prune old backups."""
        self.close()
        backup = f"{self.filename}.{self.current_date}.gz"
        with open(self.filename, "rb") as source, gzip.open(backup, "wb") as target:
            shutil.copyfileobj(source, target)
        os.truncate(self.filename, 0)
        self._open()
        self.current_date = _today()
        self.size = 0
        self._cleanup()

    def _cleanup(self) -> None:
        directory = os.path.dirname(self.filename) or "."
        base = os.path.basename(self.filename)
        try:
            names = os.listdir(directory)
        except OSError:
            return
        backups = sorted(
            (
                os.path.join(directory, name)
                for name in names
                if name.startswith(base + ".") and name.endswith(".gz")
            ),
            reverse=True,
        )

        if self.max_backups > 0 and len(backups) > self.max_backups:
            for path in backups[self.max_backups:]:
                with contextlib.suppress(OSError):
                    os.remove(path)

        if self.max_age > 0:
            cutoff = time.time() - self.max_age * _SECONDS_PER_DAY
            for path in backups:
                try:
                    modified = os.stat(path).st_mtime
                except OSError:
                    continue
                if modified < cutoff:
                    with contextlib.suppress(OSError):
                        os.remove(path)

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()