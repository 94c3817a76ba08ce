import io
import logging
import sys

import pytest
from seqops.logger.logger import logger, set_level, setup_logger


def project_handlers(target):
    # pytest attaches its own capture handlers, so only count plain stream handlers
    return [h for h in target.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "seqops"
    assert len(project_handlers(logger)) == 1
    assert logger.propagate is False


def test_setup_logger_does_not_duplicate_handlers():
    first = setup_logger("seqops.test_dup", level="DEBUG")
    second = setup_logger("seqops.test_dup", level="ERROR")
    assert first is second
    assert len(project_handlers(second)) == 1
    assert second.level == logging.DEBUG


def test_setup_logger_defaults_to_stdout():
    configured = setup_logger("seqops.test_stdout", level="INFO")
    (handler,) = project_handlers(configured)
    assert handler.stream is sys.stdout


def test_setup_logger_reads_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    configured = setup_logger("seqops.test_env")
    assert configured.level == logging.WARNING


def test_setup_logger_writes_to_stream():
    stream = io.StringIO()
    configured = setup_logger("seqops.test_stream", level="INFO", stream=stream)
    configured.info("hello")
    configured.debug("hidden")
    output = stream.getvalue()
    assert "seqops.test_stream - INFO - hello" in output
    assert "hidden" not in output


def test_set_level():
    configured = setup_logger("seqops.test_level", level="INFO")
    set_level("error", configured)
    assert configured.level == logging.ERROR


@pytest.mark.parametrize("level", ["verbose", "basic_format"])
def test_set_level_rejects_unknown_names(level):
    configured = setup_logger("seqops.test_bad_level", level="INFO")
    with pytest.raises(ValueError):
        set_level(level, configured)
    assert configured.level == logging.INFO
