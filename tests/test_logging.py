"""Tests for structured logging and timing helpers."""
import json
import logging
from mgnrega.utils.logging import log_error, log_structured
from mgnrega.utils.timing import Timer, time_function


def _entries(caplog):
    return [json.loads(record.getMessage()) for record in caplog.records if record.name == "mgnrega"]


def test_log_structured_emits_json(caplog):
    """Test log structured emits json."""
    caplog.set_level(logging.INFO, logger="mgnrega")
    log_structured("info", "Provider skipped", provider="google", reason="no credential")

    (entry,) = _entries(caplog)
    assert entry["level"] == "INFO"
    assert entry["message"] == "Provider skipped"
    assert entry["provider"] == "google"
    assert "timestamp" in entry


def test_log_error_includes_context(caplog):
    """Test log error includes context."""
    caplog.set_level(logging.INFO, logger="mgnrega")
    log_error(ValueError("bad row"), {"module": "aggregation"})

    (entry,) = _entries(caplog)
    assert entry["level"] == "ERROR"
    assert entry["error_type"] == "ValueError"
    assert entry["error_message"] == "bad row"
    assert entry["module"] == "aggregation"


def test_timer_measures_and_logs(caplog):
    """Test timer measures and logs."""
    caplog.set_level(logging.DEBUG, logger="mgnrega")
    with Timer("lookup") as timer:
        pass

    assert timer.elapsed >= 0
    (entry,) = _entries(caplog)
    assert entry["operation"] == "lookup"


def test_quiet_timer(caplog):
    """Test quiet timer."""
    caplog.set_level(logging.DEBUG, logger="mgnrega")
    with Timer("lookup", quiet=True) as timer:
        pass

    assert timer.elapsed is not None
    assert _entries(caplog) == []


def test_time_function(caplog):
    """Test time function."""
    caplog.set_level(logging.DEBUG, logger="mgnrega")

    @time_function
    def double(x):
        return x * 2

    assert double(21) == 42
    (entry,) = _entries(caplog)
    assert entry["function"] == "double"
