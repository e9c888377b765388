from __future__ import annotations

import json
import logging

from snepslog.io.logging_config import SnepslogJSONFormatter, setup_snepslog_logging


def test_snepslog_json_formatter_includes_context_fields() -> None:
    record = logging.LogRecord(
        name="snepslog",
        level=logging.INFO,
        pathname=__file__,
        lineno=42,
        msg="unit test message",
        args=(),
        exc_info=None,
    )
    record.term_context = {"category": "SetTerm"}  # type: ignore[attr-defined]
    payload = json.loads(SnepslogJSONFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["message"] == "unit test message"
    assert payload["line"] == 42
    assert payload["term_context"]["category"] == "SetTerm"


def test_formatter_omits_absent_context() -> None:
    record = logging.LogRecord("snepslog", logging.WARNING, __file__, 1, "plain", (), None)
    payload = json.loads(SnepslogJSONFormatter().format(record))
    assert "term_context" not in payload
    assert "exception" not in payload


def test_setup_snepslog_logging_emits_json_lines_on_stderr(capsys) -> None:
    logger = logging.getLogger("snepslog")
    old_handlers = list(logger.handlers)
    old_level = logger.level
    try:
        setup_snepslog_logging(level=logging.INFO, json_output=True)
        logger.info("compiled", extra={"term_context": {"mode": 3}})
        captured = capsys.readouterr()
        assert captured.out == ""
        err = captured.err.strip().splitlines()
        assert err
        parsed = json.loads(err[-1])
        assert parsed["message"] == "compiled"
        assert parsed["term_context"]["mode"] == 3
    finally:
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)


def test_setup_snepslog_logging_writes_log_file(tmp_path) -> None:
    logger = logging.getLogger("snepslog")
    old_handlers = list(logger.handlers)
    old_level = logger.level
    log_file = tmp_path / "snepslog.log"
    try:
        setup_snepslog_logging(level=logging.DEBUG, json_output=True, log_file=str(log_file))
        logger.warning("to file")
        for handler in logger.handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        messages = [json.loads(line)["message"] for line in lines]
        assert messages == ["Structured logging initialized", "to file"]
    finally:
        for handler in logger.handlers:
            if handler not in old_handlers:
                handler.close()
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)
