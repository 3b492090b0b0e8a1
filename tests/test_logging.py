"""Tests for logging configuration and utilities."""

import json
import logging
import os
import time

from filescan.logging import (
    ComponentFormatter,
    JSONLHandler,
    configure_logging,
    prune_old_logs,
    record_extra,
    resolve_level,
)


def _record(name: str = "filescan.jobs.file_scan", **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "file_updated", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestPruneOldLogs:
    def test_missing_dir(self, tmp_path):
        assert prune_old_logs(tmp_path / "nope") == 0

    def test_removes_only_old_jsonl(self, tmp_path):
        old = tmp_path / "2020-01-01.jsonl"
        new = tmp_path / "today.jsonl"
        other = tmp_path / "notes.txt"
        for path in (old, new, other):
            path.write_text("{}\n")
        ancient = time.time() - 30 * 86400
        os.utime(old, (ancient, ancient))
        os.utime(other, (ancient, ancient))

        assert prune_old_logs(tmp_path, retention_days=7) == 1
        assert not old.exists()
        assert new.exists()
        assert other.exists()


class TestResolveLevel:
    def test_explicit(self):
        assert resolve_level("debug") == "DEBUG"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("FILESCAN_LOG_LEVEL", "warning")
        assert resolve_level() == "WARNING"

    def test_invalid_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("FILESCAN_LOG_LEVEL", "chatty")
        assert resolve_level() == "INFO"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("FILESCAN_LOG_LEVEL", raising=False)
        assert resolve_level() == "INFO"


class TestFormatting:
    def test_record_extra(self):
        record = _record(**{"file.path": "/tmp/a"})
        assert record_extra(record) == {"file.path": "/tmp/a"}

    def test_component_formatter(self):
        formatter = ComponentFormatter("%(component)s | %(message)s")
        text = formatter.format(_record(**{"file.path": "/tmp/a"}))
        assert text == "jobs | file_updated file.path=/tmp/a"

    def test_component_for_foreign_logger(self):
        formatter = ComponentFormatter("%(component)s")
        assert formatter.format(_record(name="asyncio")) == "asyncio"


class TestJSONLHandler:
    def test_writes_structured_entry(self, tmp_path):
        handler = JSONLHandler(tmp_path)
        try:
            handler.emit(_record(**{"file.path": "/tmp/a"}))
        finally:
            handler.close()

        files = list(tmp_path.glob("*.jsonl"))
        assert len(files) == 1
        entry = json.loads(files[0].read_text().splitlines()[0])
        assert entry["level"] == "INFO"
        assert entry["component"] == "jobs"
        assert entry["logger"] == "filescan.jobs.file_scan"
        assert entry["message"] == "file_updated"
        assert entry["extra"] == {"file.path": "/tmp/a"}


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("FILESCAN_LOG_LEVEL", "DEBUG")
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_log_to_file(self, tmp_path):
        configure_logging(level="INFO", log_to_file=True, logs_dir=tmp_path)
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, JSONLHandler) for h in handlers)

        logging.getLogger("filescan.scheduling.runner").info(
            "job_runner_started", extra={"job.count": 2}
        )

        lines = next(tmp_path.glob("*.jsonl")).read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["component"] == "scheduling"
        assert entry["extra"] == {"job.count": 2}
