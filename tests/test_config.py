import json
import logging

import pytest

from propublica_congress.config import Settings
from propublica_congress.log import JsonFormatter, configure_logging, logger


def test_settings_defaults(monkeypatch):
    for name in ("PROPUBLICA_API_KEY", "PROPUBLICA_CURRENT_CONGRESS", "PROPUBLICA_STRICT_RESULTS"):
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.api_key is None
    assert config.current_congress == 115
    assert config.host == "https://api.propublica.org"
    assert config.api_version == "1"
    assert config.strict_results is True
    assert config.max_attempts == 1


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("PROPUBLICA_API_KEY", "env_key")
    monkeypatch.setenv("PROPUBLICA_CURRENT_CONGRESS", "118")
    monkeypatch.setenv("PROPUBLICA_STRICT_RESULTS", "false")
    config = Settings(_env_file=None)
    assert config.api_key == "env_key"
    assert config.current_congress == 118
    assert config.strict_results is False


def test_validate_api_key():
    with pytest.raises(ValueError) as exc:
        Settings(_env_file=None, api_key="").validate_api_key()
    assert "PROPUBLICA_API_KEY" in str(exc.value)
    Settings(_env_file=None, api_key="K1").validate_api_key()


def test_json_formatter_includes_props():
    record = logging.LogRecord("propublica_congress.client", logging.DEBUG, __file__, 1, "GET url", None, None)
    record.props = {"endpoint": "members/new", "offset": 0}
    line = json.loads(JsonFormatter().format(record))
    assert line["message"] == "GET url"
    assert line["level"] == "DEBUG"
    assert line["logger"] == "propublica_congress.client"
    assert line["function"] == record.funcName
    assert line["request"] == {"endpoint": "members/new", "offset": 0}
    assert "endpoint" not in line


def test_json_formatter_omits_request_without_props():
    record = logging.LogRecord("propublica_congress", logging.INFO, __file__, 1, "ready", None, None)
    assert "request" not in json.loads(JsonFormatter().format(record))


def test_configure_logging_replaces_handlers():
    config = Settings(_env_file=None, log_json=True, log_level="debug")
    configure_logging(config)
    configure_logging(config)
    try:
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers = []
        logger.setLevel(logging.NOTSET)
