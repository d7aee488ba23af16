"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

CONTEXT_FIELDS = ("operation", "status_code")


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "INFO", "service": "spotify-proxy",
         "logger": "spotify_proxy.client", "message": "...",
         "operation": "fetch album", "status_code": 503}
    """

    def __init__(self, service: str = "spotify-proxy") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Context attached by the proxy via ``extra=``
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
