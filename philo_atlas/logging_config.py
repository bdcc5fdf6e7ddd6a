from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "PHILO_ATLAS_LOG_FORMAT"
LOG_LEVEL_ENV = "PHILO_ATLAS_LOG_LEVEL"

# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "werkzeug")

_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # getLevelName returns "Level X" for unknown names
        return resolved if isinstance(resolved, int) else logging.INFO
    return int(level)


def configure_logging(
        level: Optional[Union[int, str]] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the atlas.

    Format: `force_format` ("json" or "plain"), else $PHILO_ATLAS_LOG_FORMAT,
    else JSON. Level: `level`, else $PHILO_ATLAS_LOG_LEVEL, else INFO.

    Request logs from the HTTP client and the dev server are capped at WARNING
    unless the atlas itself runs at DEBUG.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    root_level = _resolve_level(level)

    root = logging.getLogger()
    root.setLevel(root_level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(jsonlogger.JsonFormatter(_FIELDS))

    # Replace existing handlers so re-configuring never duplicates output
    root.handlers.clear()
    root.addHandler(handler)

    noisy_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
