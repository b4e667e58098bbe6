"""
dockforge Logging

Structured logging on top of the standard ``logging`` module.

Loggers accept keyword context in addition to the message:

    logger = get_logger(__name__)
    logger.info("Rendered artifact", artifact="Dockerfile", size=512)

Context is rendered as ``key=value`` pairs in text mode, or merged into the
record in JSON mode (``configure_logging(json_format=True)``).
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "dockforge"

_CONTEXT_ATTR = "dockforge_context"


class _TextFormatter(logging.Formatter):
    """Human readable formatter that appends structured context."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context: Dict[str, Any] = getattr(record, _CONTEXT_ATTR, {}) or {}
        if not context:
            return base
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{base} | {pairs}"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, _CONTEXT_ATTR, {}) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time, so redirected streams are honoured."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self) -> Any:
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


class DockforgeLogger:
    """
    Logger adapter accepting structured keyword context.

    Wraps a standard library logger; ``exc_info`` is passed through, every
    other keyword becomes context.
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, exc_info: Any = None, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, msg, exc_info=exc_info, extra={_CONTEXT_ATTR: context})

    def debug(self, msg: str, **context: Any) -> None:
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(logging.WARNING, msg, **context)

    def error(self, msg: str, **context: Any) -> None:
        self._log(logging.ERROR, msg, **context)

    def exception(self, msg: str, **context: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=True, **context)


def get_logger(name: str) -> DockforgeLogger:
    """Get a structured logger. Names outside ``dockforge`` are nested under it."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return DockforgeLogger(name)


def configure_logging(
    level: str = "info",
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> logging.Logger:
    """
    Configure the ``dockforge`` logger hierarchy.

    Args:
        level: Log level name (debug, info, warn, warning, error)
        json_format: Emit one JSON object per line instead of text
        stream: Output stream (defaults to stderr)

    Returns:
        The configured root dockforge logger
    """
    level_name = level.upper()
    if level_name == "WARN":
        level_name = "WARNING"

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler: logging.StreamHandler = logging.StreamHandler(stream) if stream else _StderrHandler()
    if json_format:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(_TextFormatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root


__all__ = ["DockforgeLogger", "get_logger", "configure_logging", "ROOT_LOGGER_NAME"]
