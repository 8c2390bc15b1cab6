"""The score file and the lock file that guards it."""

from __future__ import annotations

import os
import stat
import time
from typing import IO, Callable


class ScoreLockBusy(Exception):
    """Raised when the score file lock cannot be had."""


class ScoreLock:
    """A lock file held while the score file is updated; stale locks are broken."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        stale_after: float = 10,
        retries: int = 5,
        ask: Callable[[], bool] | None = None,
    ) -> None:
        self.path = os.fspath(path)
        self.stale_after = stale_after
        self.retries = retries
        self.ask = ask
        self._fd: int | None = None

    def _try_create(self) -> bool:
        try:
            self._fd = os.open(self.path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o666)
        except FileExistsError:
            return False
        return True

    def _age(self) -> float | None:
        try:
            return time.time() - os.stat(self.path).st_mtime
        except FileNotFoundError:
            return None

    def _break_stale(self) -> None:
        try:
            os.unlink(self.path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise ScoreLockBusy(f"cannot remove stale lock {self.path}") from exc

    def acquire(self) -> None:
        """Take the lock, waiting a little and breaking a stale one; raise ScoreLockBusy if not."""
        while True:
            if self._try_create():
                return
            for _ in range(self.retries):
                time.sleep(1)
                if self._try_create():
                    return
            age = self._age()
            if age is None:
                if self._try_create():
                    return
                continue
            if age > self.stale_after:
                self._break_stale()
                continue
            break
        if self.ask is None or not self.ask():
            raise ScoreLockBusy(f"the score file is very busy: {self.path}")
        while True:
            if self._try_create():
                return
            age = self._age()
            if age is not None and age > self.stale_after:
                self._break_stale()
                continue
            time.sleep(1)

    def release(self) -> None:
        """Give up the lock and remove the lock file."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None
        try:
            os.unlink(self.path)
        except FileNotFoundError:
            pass

    def __enter__(self) -> ScoreLock:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


def open_score(path: str | os.PathLike[str]) -> IO[bytes]:
    """Open the score file for reading and writing, creating it group-writable if missing."""
    try:
        return open(path, "r+b")
    except FileNotFoundError:
        handle = open(path, "w+b")
        os.chmod(path, 0o664)
        return handle


def is_symlink(path: str | os.PathLike[str]) -> bool:
    """Return True if `path` exists and is anything other than a regular file."""
    try:
        info = os.lstat(path)
    except OSError:
        return False
    return not stat.S_ISREG(info.st_mode)