"""Tests for log rotation cleanup."""
import os
import time

from utils.logger import cleanup_old_logs, get_logger


def test_cleanup_removes_only_expired_rotations(tmp_path):
    old = tmp_path / "coloring_book.log.2000-01-01"
    recent = tmp_path / f"coloring_book.log.{time.strftime('%Y-%m-%d')}"
    current = tmp_path / "coloring_book.log"
    for path in (old, recent, current):
        path.write_text("log line\n")

    deleted = cleanup_old_logs(str(tmp_path), retention_days=10)

    assert deleted == 1
    assert not old.exists()
    assert recent.exists()
    assert current.exists()


def test_cleanup_falls_back_to_mtime(tmp_path):
    odd = tmp_path / "coloring_book.log.backup"
    odd.write_text("log line\n")
    stale = time.time() - 30 * 24 * 3600
    os.utime(odd, (stale, stale))

    assert cleanup_old_logs(str(tmp_path), retention_days=10) == 1


def test_get_logger_is_namespaced():
    assert get_logger("image").name == "coloring_book.image"
    assert get_logger().name == "coloring_book"
