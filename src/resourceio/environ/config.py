# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio's environment settings module

Every setting is read from an environment variable each time it is requested,
so a change made to os.environ is taken into account immediately.
"""

from __future__ import annotations

__all__ = [
    "BUFFER_SIZE_ENV",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_URL_TIMEOUT",
    "LOG_LEVELS",
    "LOG_LEVEL_ENV",
    "URL_TIMEOUT_ENV",
    "get_buffer_size",
    "get_log_level",
    "get_url_timeout",
]

import math
import os
from typing import Final

from ..system.validation import valid_float, valid_integer

BUFFER_SIZE_ENV: Final[str] = "RESOURCEIO_BUFFER_SIZE"
URL_TIMEOUT_ENV: Final[str] = "RESOURCEIO_URL_TIMEOUT"
LOG_LEVEL_ENV: Final[str] = "RESOURCEIO_LOG_LEVEL"

DEFAULT_BUFFER_SIZE: Final[int] = 8192
DEFAULT_URL_TIMEOUT: Final[float] = 10.0
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_buffer_size() -> int:
    """Chunk size used when a stream must be read in full"""
    value = os.environ.get(BUFFER_SIZE_ENV, "")
    if not value:
        return DEFAULT_BUFFER_SIZE
    try:
        return valid_integer(value=value, min_value=1)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for {BUFFER_SIZE_ENV!r}, got {value!r}") from exc


def get_url_timeout() -> float:
    """Timeout (in seconds) of URL requests"""
    value = os.environ.get(URL_TIMEOUT_ENV, "")
    if not value:
        return DEFAULT_URL_TIMEOUT
    try:
        timeout = valid_float(value=value, min_value=0)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for {URL_TIMEOUT_ENV!r}, got {value!r}") from exc
    if timeout == 0 or not math.isfinite(timeout):
        raise ValueError(f"Invalid value for {URL_TIMEOUT_ENV!r}, got {value!r}")
    return timeout


def get_log_level() -> str:
    value = os.environ.get(LOG_LEVEL_ENV, "")
    if not value:
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid value for {LOG_LEVEL_ENV!r}, got {value!r}")
    return level
