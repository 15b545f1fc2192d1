# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio's resource module"""

from __future__ import annotations

__all__ = [
    "AbstractResource",
    "PackageResource",
    "PackageType",
    "PathHandle",
    "PathResource",
    "Resource",
    "ResourceError",
    "ResourceIsADirectoryError",
    "ResourceNotFoundError",
    "ResourceNotResolvableError",
    "UrlResource",
    "WritableResource",
]


############ Package initialization ############
from .abc import *
from .base import *
from .exceptions import *
from .package import *
from .path import *
from .url import *
