import os
import time

import pytest

from dungeoncore.scores import ScoreLock, ScoreLockBusy, is_symlink, open_score


def test_lock_creates_and_release_removes(tmp_path):
    path = tmp_path / "game.lck"
    lock = ScoreLock(path, 10, 0, None)
    lock.acquire()
    assert path.exists()
    lock.release()
    assert not path.exists()


def test_second_lock_busy(tmp_path):
    path = tmp_path / "game.lck"
    with ScoreLock(path, 10, 0, None):
        with pytest.raises(ScoreLockBusy):
            ScoreLock(path, 10, 0, None).acquire()
    assert not path.exists()


def test_declined_wait_is_busy(tmp_path):
    path = tmp_path / "game.lck"
    asked = []
    path.write_text("")
    with pytest.raises(ScoreLockBusy):
        ScoreLock(path, 10, 0, lambda: asked.append(1) or False).acquire()
    assert asked == [1]


def test_stale_lock_is_broken(tmp_path):
    path = tmp_path / "game.lck"
    path.write_text("")
    old = time.time() - 100
    os.utime(path, (old, old))
    lock = ScoreLock(path, 10, 0, None)
    lock.acquire()
    assert time.time() - path.stat().st_mtime < 50
    lock.release()
    assert not path.exists()


def test_open_score_creates_and_persists(tmp_path):
    path = tmp_path / "game.scr"
    with open_score(path) as handle:
        handle.write(b"scores")
    assert path.stat().st_mode & 0o777 == 0o664
    with open_score(path) as handle:
        assert handle.read() == b"scores"


def test_is_symlink(tmp_path):
    regular = tmp_path / "file"
    regular.write_text("x")
    assert is_symlink(regular) is False
    assert is_symlink(tmp_path) is True
    assert is_symlink(tmp_path / "missing") is False
    link = tmp_path / "link"
    os.symlink(regular, link)
    assert is_symlink(link) is True