"""Tests for the logging infrastructure."""

import logging

import pytest

from nxdt_paths.infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing


@pytest.mark.unit
class TestLoggerSetup:
    """Console/file handler installation."""

    def test_initialize_creates_log_file(self, tmp_path):
        log_dir = tmp_path / "logs"
        LoggerSetup.initialize(log_dir, verbose=True)

        assert LoggerSetup.is_initialized()
        log_file = LoggerSetup.get_log_file_path()
        assert log_file is not None
        assert log_file.parent == log_dir
        assert log_file.name.startswith("nxdt_paths_")

        get_logger("nxdt_paths.test").debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_initialize_is_idempotent(self, tmp_path):
        LoggerSetup.initialize(tmp_path / "a")
        first = LoggerSetup.get_log_file_path()
        LoggerSetup.initialize(tmp_path / "b")

        assert LoggerSetup.get_log_file_path() == first
        assert not (tmp_path / "b").exists()

    def test_shutdown_resets_state(self, tmp_path):
        LoggerSetup.initialize(tmp_path / "logs")
        LoggerSetup.shutdown()

        assert not LoggerSetup.is_initialized()
        assert LoggerSetup.get_log_file_path() is None

    def test_shutdown_only_detaches_own_handlers(self, tmp_path):
        LoggerSetup.initialize(tmp_path / "logs")
        installed = list(logging.getLogger().handlers)

        extra = logging.NullHandler()
        logging.getLogger().addHandler(extra)
        try:
            LoggerSetup.shutdown()
            root_handlers = logging.getLogger().handlers
            assert extra in root_handlers
            assert not any(handler in root_handlers for handler in installed)
        finally:
            logging.getLogger().removeHandler(extra)

    def test_console_output_goes_to_stderr(self, tmp_path, capsys):
        LoggerSetup.initialize(tmp_path / "logs")
        get_logger("nxdt_paths.test").info("console message")

        captured = capsys.readouterr()
        assert "INFO: console message" in captured.err
        assert "console message" not in captured.out


@pytest.mark.unit
class TestLogTiming:
    """Timing decorator behaviour."""

    def test_returns_result(self, caplog):
        @log_timing
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(2, 3) == 5

        assert any("Completed" in record.message for record in caplog.records)

    def test_reraises_and_logs_failure(self, caplog):
        @log_timing
        def broken():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            broken()

        assert any(record.levelno == logging.ERROR and "boom" in record.message for record in caplog.records)


@pytest.mark.unit
class TestProgressTracker:
    """Batch counters and summary reporting."""

    @pytest.fixture
    def tracker(self):
        return ProgressTracker(get_logger("nxdt_paths.test.progress"))

    def test_counts_successes_and_failures(self, tracker):
        with tracker.track_name("good"):
            pass

        with pytest.raises(ValueError):
            with tracker.track_name("bad"):
                raise ValueError("bad name")

        assert tracker.processed_count == 2
        assert tracker.failed_count == 1
        assert tracker.succeeded_count == 1

    def test_failed_operation_is_logged(self, tracker, caplog):
        with pytest.raises(RuntimeError):
            with tracker.track_operation("failing"):
                raise RuntimeError("stop")

        assert any(
            record.levelno == logging.ERROR and "Failed operation: failing" in record.message
            for record in caplog.records
        )

    def test_report_summary(self, tracker, caplog):
        with tracker.track_name("one"):
            pass

        with caplog.at_level(logging.INFO):
            tracker.report_summary()

        assert "1 names, 1 succeeded, 0 failed" in caplog.text

    def test_log_memory_usage(self, tracker, caplog):
        with caplog.at_level(logging.DEBUG):
            tracker.log_memory_usage()
        assert "Memory usage" in caplog.text
