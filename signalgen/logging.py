"""Logging utilities for signalgen commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, MutableMapping, Tuple

_LOGGER_NAME = "signalgen"


class OwnerAdapter(logging.LoggerAdapter):
    """Tag records with the QObject whose signals are being generated."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("owner", self.extra["owner"])
        kwargs["extra"] = extra
        return msg, kwargs


class OwnerFormatter(logging.Formatter):
    """Formatter that prefixes messages with ``<owner>: `` when a record carries one."""

    def format(self, record: logging.LogRecord) -> str:
        owner = getattr(record, "owner", None)
        record.owner_prefix = f"{owner}: " if owner else ""
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the signalgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def owner_logger(logger: logging.Logger, owner: str) -> OwnerAdapter:
    """Wrap ``logger`` so every record names ``owner``."""
    return OwnerAdapter(logger, {"owner": owner})


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the signalgen logger with console output and an optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(
        OwnerFormatter("[signalgen] %(levelname)s %(owner_prefix)s%(message)s")
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            OwnerFormatter("%(asctime)s %(levelname)s %(name)s: %(owner_prefix)s%(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["OwnerAdapter", "OwnerFormatter", "configure_logging", "get_logger", "owner_logger"]
