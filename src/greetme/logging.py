from __future__ import annotations

import json
import logging
import sys


class JsonFormatter(logging.Formatter):
    """Very small JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload, default=str)


def configure_logging(level: str | int = "WARNING", fmt: str = "plain") -> None:
    """Configure logging on stderr.

    Default format is human friendly, but with ``fmt="json"`` the output
    becomes one JSON object per line.  Stdout is left to the greeting
    itself.
    """

    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    logging.basicConfig(level=level, handlers=[handler], force=True)
