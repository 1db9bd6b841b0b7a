import logging
from pathlib import Path

import pytest

from k1ng_client.logging_config import resolve_log_level, setup_logging


def test_resolve_log_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert resolve_log_level() == logging.WARNING
    assert resolve_log_level("debug") == logging.DEBUG

    monkeypatch.setenv("LOG_LEVEL", "error")
    assert resolve_log_level() == logging.ERROR


@pytest.mark.parametrize("name", ["verbose", "", "10"])
def test_resolve_unknown_level(name):
    with pytest.raises(ValueError):
        resolve_log_level(name)


def test_setup_logging_writes_package_records_to_file(tmp_path: Path):
    log_file = tmp_path / "k1ng.log"
    logger = setup_logging("DEBUG", str(log_file))
    try:
        logging.getLogger("k1ng_client.sms").debug("queued 0811")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert "k1ng_client.sms - DEBUG - queued 0811" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
