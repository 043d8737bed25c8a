import json
import sys
import logging

import pytest

from atm.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_atm_logger():
    logger = logging.getLogger("atm")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG")
    logger = setup_logging("WARNING")

    assert logger.name == "atm"
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_logs_go_to_stderr(capsys):
    setup_logging("INFO")
    get_logger("directory").info("hello operator")

    captured = capsys.readouterr()
    assert "hello operator" in captured.err
    assert "[INFO] atm.directory" in captured.err
    assert captured.out == ""


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO


def test_json_format(capsys):
    setup_logging("INFO", fmt="json")
    get_logger("teller").info("dispensed %d", 40, extra={"account_id": 3})

    entry = json.loads(capsys.readouterr().err.strip())
    assert entry["level"] == "INFO"
    assert entry["logger"] == "atm.teller"
    assert entry["message"] == "dispensed 40"
    assert entry["account_id"] == 3


def test_json_formatter_exception():
    try:
        raise KeyError(7)
    except KeyError:
        record = logging.getLogger("atm").makeRecord(
            "atm", logging.ERROR, __file__, 1, "boom", None, exc_info=sys.exc_info()
        )

    entry = json.loads(JSONFormatter().format(record))
    assert entry["exception"]["type"] == "KeyError"


def test_get_logger_namespace():
    assert get_logger("seed").name == "atm.seed"
