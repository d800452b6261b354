from __future__ import annotations

import json
import logging

from movavg.utils.logging import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="movavg.core.predict",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Selected moving-average window",
        args=(),
        exc_info=None,
    )
    record.window = 4
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "movavg.core.predict"
    assert payload["message"] == "Selected moving-average window"
    assert payload["window"] == 4
    assert "lineno" not in payload


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        setup_logging("warning", json_output=False)
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
