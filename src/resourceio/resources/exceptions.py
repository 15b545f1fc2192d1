# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Resource exceptions definition module"""

from __future__ import annotations

__all__ = [
    "ResourceError",
    "ResourceIsADirectoryError",
    "ResourceNotFoundError",
    "ResourceNotResolvableError",
]

import errno
import os


class ResourceError(OSError):
    """Base class of the errors raised by the resource layer itself

    Errors coming from the underlying storage are never wrapped into this class.
    """


class ResourceNotFoundError(ResourceError, FileNotFoundError):
    """The resource content cannot be reached"""

    def __init__(self, *args: object) -> None:
        match args:
            case [str() | os.PathLike() as location]:
                super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(location))
            case _:
                super().__init__(*args)


class ResourceIsADirectoryError(ResourceNotFoundError):
    """The resource location denotes a directory, which has no content"""

    def __init__(self, *args: object) -> None:
        match args:
            case [str() | os.PathLike() as location]:
                super().__init__(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(location))
            case _:
                super().__init__(*args)


class ResourceNotResolvableError(ResourceNotFoundError):
    """The resource cannot be represented in the requested form (native file, URI...)"""

    def __init__(self, location: str | os.PathLike[str], target: str = "absolute file path") -> None:
        ResourceError.__init__(self, f"{os.fspath(location)} cannot be resolved to {target}")
        self.location: str = os.fspath(location)
        self.target: str = target
