# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio's system utilities module"""

from __future__ import annotations

__all__ = [
    "InstanceFilter",
    "valid_float",
    "valid_integer",
    "valid_not_none",
]


############ Package initialization ############
from .filter import *
from .validation import *
