# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Resource abstract base classes module"""

from __future__ import annotations

__all__ = [
    "PathHandle",
    "Resource",
    "WritableResource",
]

import os
from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import IO, Any, BinaryIO, ContextManager, Protocol, runtime_checkable


@runtime_checkable
class Resource(Protocol, metaclass=ABCMeta):
    """Handle to byte content identified by a location

    A resource never changes the location it denotes, but the content behind it
    may appear, change or vanish between two calls.
    """

    __slots__ = ()

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the content is currently present. Never raises for a well-formed resource."""
        raise NotImplementedError

    @abstractmethod
    def is_readable(self) -> bool:
        """Return True if the content can be opened for reading right now. A directory is never readable."""
        raise NotImplementedError

    @abstractmethod
    def open(self) -> BinaryIO:
        """Open a fresh binary stream positioned at the start of the content

        The caller owns the stream and must close it.

        Raises:
            ResourceNotFoundError: the content does not exist.
            ResourceIsADirectoryError: the location is a directory.
        """
        raise NotImplementedError

    @abstractmethod
    def get_url(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_uri(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_file(self) -> Path:
        """Return the native file path of this resource

        Raises:
            ResourceNotResolvableError: the resource has no native file representation.
        """
        raise NotImplementedError

    @abstractmethod
    def as_file(self) -> ContextManager[Path]:
        raise NotImplementedError

    @abstractmethod
    def content_length(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def last_modified(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def create_relative(self, relative_path: str) -> Resource:
        raise NotImplementedError

    @property
    @abstractmethod
    def filename(self) -> str | None:
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError


@runtime_checkable
class WritableResource(Resource, Protocol, metaclass=ABCMeta):
    __slots__ = ()

    @abstractmethod
    def is_writable(self) -> bool:
        """Return True if an output stream can be opened right now. A directory is never writable."""
        raise NotImplementedError

    @abstractmethod
    def open_output(self) -> BinaryIO:
        """Open a fresh binary output stream, creating or truncating the content

        Raises:
            ResourceIsADirectoryError: the location is a directory.
        """
        raise NotImplementedError


@runtime_checkable
class PathHandle(Protocol):
    """Hierarchical path on any storage provider (the local filesystem is one of them)"""

    @property
    def name(self) -> str:
        ...

    def exists(self) -> bool:
        ...

    def is_dir(self) -> bool:
        ...

    def stat(self) -> os.stat_result:
        ...

    def open(self, mode: str = ...) -> IO[Any]:
        ...

    def joinpath(self, *pathsegments: str) -> PathHandle:
        ...

    def absolute(self) -> PathHandle:
        ...

    def as_uri(self) -> str:
        ...
