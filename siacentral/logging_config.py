"""Opt-in logging setup for applications using the Sia Central clients."""

from __future__ import annotations

import json
import logging
from typing import Optional

from siacentral.config import ClientConfig, default_config

_EXTRA_KEYS = ("method", "target", "status_code", "error")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def resolve_level(level_name: str) -> int:
    level = getattr(logging, (level_name or "").upper(), None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(config: Optional[ClientConfig] = None) -> None:
    """
    Configure the root logger from ``log_level`` and ``log_format``.

    The library never calls this itself; applications opt in.
    """
    config = config or default_config
    level = resolve_level(config.log_level)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, force=True)
