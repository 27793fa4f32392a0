"""Logging for the ``txn_summary`` package.

Modules log through ``get_logger(__name__)``; only the CLI calls
``configure_logging``, which sends records to stderr so stdout stays
reserved for the summary.
"""

from __future__ import annotations

import logging
import os
import sys

_ROOT = "txn_summary"
_LEVEL_ENV_VAR = "TXN_SUMMARY_LOG_LEVEL"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def _parse_level(level: str | None) -> int:
    """Resolve a level name, then ``TXN_SUMMARY_LOG_LEVEL``, then WARNING."""
    for candidate in (level, os.getenv(_LEVEL_ENV_VAR)):
        if candidate:
            numeric = logging.getLevelName(candidate.strip().upper())
            if isinstance(numeric, int):
                return numeric
    return logging.WARNING


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(level: str | None = None) -> None:
    root = logging.getLogger(_ROOT)
    root.setLevel(_parse_level(level))
    root.propagate = False
    if not any(isinstance(h, _StderrHandler) for h in root.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
