"""Root logger setup for the post service.

Output goes to stdout, either as plain text lines or as one JSON object per
line when ``LOG_JSON`` is set.
"""

from __future__ import annotations

import json
import logging
import sys
import time

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers that parse stdout."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname,
            "ts": round(time.time(), 3),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(level: int | str = "INFO", json_output: bool = False) -> logging.Logger:
    """Replace the root handlers with a single stdout handler.

    Args:
        level: Level name (any case) or number, usually ``settings.log_level``.
        json_output: Emit JSON lines instead of ``PLAIN_FORMAT`` text.

    Returns:
        The ``chatterbox_posts`` package logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(PLAIN_FORMAT))
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger("chatterbox_posts")
