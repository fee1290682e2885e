from __future__ import annotations

import logging
import os
import platform
import sys
import threading
from typing import List, Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VARS = ("ASSETDESK_LOG_LEVEL",)
_DEBUG_FLAGS = ("ASSETDESK_DEBUG",)


def _coerce_level(value: Optional[str], fallback: int) -> int:
    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    upper = text.upper()
    if hasattr(logging, upper):
        candidate = getattr(logging, upper)
        if isinstance(candidate, int):
            return candidate
    return fallback


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_env_level() -> Optional[int]:
    for var in _LEVEL_ENV_VARS:
        value = os.getenv(var)
        if value:
            return _coerce_level(value, logging.INFO)
    if any(_env_truthy(os.getenv(flag)) for flag in _DEBUG_FLAGS):
        return logging.DEBUG
    return None


class LogBuffer(logging.Handler):
    """Keep every formatted record in memory for the Save Log command."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.setFormatter(logging.Formatter(_DEFAULT_FORMAT, _DEFAULT_DATEFMT))
        self._lines: List[str] = []
        self._guard = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:
            self.handleError(record)
            return
        with self._guard:
            self._lines.append(line)

    def text(self) -> str:
        with self._guard:
            if not self._lines:
                return ""
            return "\n".join(self._lines) + "\n"

    def clear(self) -> None:
        with self._guard:
            self._lines.clear()


def configure_root(
    default_level: int | str = logging.INFO,
    *,
    buffer: Optional[LogBuffer] = None,
) -> int:
    """
    Configure the root logger with a compact format.

    Environment overrides:
      - ASSETDESK_LOG_LEVEL: explicit log level
      - ASSETDESK_DEBUG: truthy -> DEBUG

    When ``buffer`` is given it is attached to the root logger once, so the
    whole session can be written out later.
    """
    fallback = (
        _coerce_level(default_level, logging.INFO)
        if isinstance(default_level, str)
        else int(default_level)
    )
    effective = _resolve_env_level() or fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    if buffer is not None and buffer not in root.handlers:
        root.addHandler(buffer)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)


def log_system_information(app_name: str, logger: Optional[logging.Logger] = None) -> None:
    """Log interpreter and host details at session start."""
    log = logger or logging.getLogger(app_name)
    log.info("%s", app_name)
    log.info("System: %s %s", platform.system(), platform.release())
    log.info("Architecture: %s", platform.machine() or "unknown")
    log.info("Python: %s (%s)", platform.python_version(), sys.executable)
