# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Uniform access to byte content

resourceio gives a single handle, the Resource, over content stored on the local
filesystem (or any other path provider), inside Python packages or behind URLs,
plus a small include/exclude instance filter.

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.
This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

__all__ = [
    "AbstractResource",
    "InstanceFilter",
    "PackageResource",
    "PathResource",
    "Resource",
    "ResourceError",
    "ResourceIsADirectoryError",
    "ResourceNotFoundError",
    "ResourceNotResolvableError",
    "UrlResource",
    "WritableResource",
]

__author__ = "FrankySnow9"
__contact__ = "clairicia.rcj.francis@gmail.com"
__copyright__ = "Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine"
__credits__ = ["FrankySnow9"]
__deprecated__ = False
__email__ = "clairicia.rcj.francis@gmail.com"
__license__ = "GNU GPL v3.0"
__maintainer__ = "FrankySnow9"
__status__ = "Development"
__version__ = "1.0.0.dev1"

import sys

############ Environment initialization ############
if sys.version_info < (3, 10):
    raise ImportError(
        "This library must be run with python >= 3.10 (actual={}.{}.{})".format(*sys.version_info[0:3]),
        name=__name__,
        path=__file__,
    )

############ Package initialization ############
from .resources import (
    AbstractResource,
    PackageResource,
    PathResource,
    Resource,
    ResourceError,
    ResourceIsADirectoryError,
    ResourceNotFoundError,
    ResourceNotResolvableError,
    UrlResource,
    WritableResource,
)
from .system.filter import InstanceFilter

############ Cleanup ############
del sys
