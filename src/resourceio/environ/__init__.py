# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio's environment helper module

Contains the settings read from the running environment
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


############ Package initialization ############
from .config import *
