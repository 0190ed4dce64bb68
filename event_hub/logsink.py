"""
Event Hub — Logging sink
Toggleable wrapper over a stdlib logger. Each hub owns (or is given) its
own sink, so logging is configured per hub rather than globally.
"""

from __future__ import annotations

import logging

from . import config


class LogSink:
    """Prefixing log/warn/error front end that is silent while disabled."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        enabled: bool | None = None,
        prefix: str | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(config.LOGGER_NAME)
        self.enabled = config.LOG_ENABLED if enabled is None else bool(enabled)
        self.prefix = config.LOG_PREFIX if prefix is None else prefix

    def _write(self, level: int, msg: str, args: tuple, force: bool = False) -> None:
        if not (self.enabled or force):
            return
        if self.prefix:
            msg = f"{self.prefix} {msg}"
        self.logger.log(level, msg, *args)

    def log(self, msg: str, *args) -> None:
        self._write(logging.INFO, msg, args)

    def warn(self, msg: str, *args) -> None:
        self._write(logging.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._write(logging.ERROR, msg, args)

    def force(self, msg: str, *args) -> None:
        """Write at INFO regardless of the enabled flag."""
        self._write(logging.INFO, msg, args, force=True)

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"<LogSink {self.logger.name} {state}>"
