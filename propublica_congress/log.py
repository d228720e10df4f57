import json
import logging
from datetime import UTC, datetime

from propublica_congress.config import Settings, settings

logger = logging.getLogger("propublica_congress")


class JsonFormatter(logging.Formatter):
    """Formatter that writes one JSON object per log record.

    Request details the client attaches through ``extra={"props": ...}``
    are nested under ``"request"`` so they never clash with record fields.
    """

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }
        props = getattr(record, "props", None)
        if props:
            log_record["request"] = props
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False, default=str)


def configure_logging(config: Settings | None = None):
    """Configure the package logger based on settings.

    Nothing calls this on import; applications opt in.
    """
    config = config or settings
    handler = logging.StreamHandler()

    if config.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    # Reset handlers to avoid duplication if called multiple times
    logger.handlers = []
    logger.addHandler(handler)
    logger.setLevel(config.log_level.upper())
