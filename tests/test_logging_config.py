from __future__ import annotations

import json
import logging

import pytest

from app.core.config import Settings
from app.core.logging_config import configure_logging


def test_json_logs_escape_quotes_and_newlines(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Settings(_env_file=None, log_json=True))
    try:
        logging.getLogger("services.idea_store").warning('Skipping "quoted" value\nwith a \\ backslash')
        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    finally:
        configure_logging(Settings(_env_file=None))

    record = json.loads(lines[-1])
    assert record["message"] == 'Skipping "quoted" value\nwith a \\ backslash'
    assert record["level"] == "WARNING"
    assert record["logger"] == "services.idea_store"
    assert "time" in record


def test_plain_logs_use_text_format(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Settings(_env_file=None))
    logging.getLogger("services.batch_planner").warning("Batch generation failed for 2025-06-01")

    output = capsys.readouterr().err
    assert "WARNING" in output
    assert "services.batch_planner Batch generation failed for 2025-06-01" in output
