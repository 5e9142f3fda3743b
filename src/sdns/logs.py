"""Logging setup driven by the ``log`` and ``loglevel`` config options."""

from __future__ import annotations

import logging
import sys

import sdns.config

LEVELS = {
    "crit": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_FORMAT = "%(asctime)s %(levelname)s %(message)s%(context)s"


class KeyValueFormatter(logging.Formatter):
    """Formatter that appends ``key=value`` pairs from a ``data`` extra."""

    def __init__(self, fmt: str = _FORMAT, datefmt: str | None = None) -> None:
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        data = getattr(record, "data", None)
        if isinstance(data, dict) and data:
            record.context = "".join(f" {k}={v}" for k, v in data.items())  # type: ignore[attr-defined]
        else:
            record.context = ""  # type: ignore[attr-defined]
        return super().format(record)


def parse_level(name: str) -> int:
    """Map a config verbosity name to a ``logging`` level."""
    if not name:
        return logging.INFO
    try:
        return LEVELS[name.lower()]
    except KeyError:
        raise sdns.config.ConfigError(f"log verbosity level unknown: {name!r}") from None


def configure(cfg: sdns.config.Config) -> logging.Handler:
    """Install a single handler on the ``sdns`` logger according to *cfg*."""
    level = parse_level(cfg.log_level)

    if cfg.log:
        try:
            handler: logging.Handler = logging.FileHandler(cfg.log, encoding="utf-8")
        except OSError as exc:
            raise sdns.config.ConfigError(f"could not open log file: {exc}") from exc
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(KeyValueFormatter())

    logger = logging.getLogger("sdns")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
