# tests/test_logging.py
import io
import json
import logging

from springbootchat.modules.login.logging_utils import _JsonLineFormatter, log_event
from springbootchat.utils.loggers import get_logger


def _json_logger(name: str):
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setFormatter(_JsonLineFormatter())
    logger = logging.getLogger(name)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, buf


def test_log_event_writes_one_json_line():
    logger, buf = _json_logger("springbootchat.tests.json")

    log_event(logger, "login", "dispatch", "login dispatched",
              {"nickname": "Jo", "phase": "overridden?"})

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[0])
    assert rec["level"] == "INFO"
    assert rec["msg"] == "login dispatched"
    assert rec["ts"].endswith("Z")
    # required keys are not overwritten by extra
    assert rec["extra"] == {"op": "login", "phase": "dispatch", "nickname": "Jo"}


def test_log_event_respects_level():
    logger, buf = _json_logger("springbootchat.tests.json_level")
    logger.setLevel(logging.INFO)

    log_event(logger, "login", "skip", "dropped", level=logging.DEBUG)

    assert buf.getvalue() == ""


def test_console_loggers_share_the_package_root():
    log = get_logger("main")
    assert log.name == "springbootchat.main"
    assert get_logger("springbootchat.dev_launcher").name == "springbootchat.dev_launcher"
    assert logging.getLogger("springbootchat").handlers
