# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Filesystem path resource module"""

from __future__ import annotations

__all__ = ["PathResource"]

import io
import logging
import ntpath
import os
import posixpath
from pathlib import Path, PurePath, PureWindowsPath
from typing import Any, BinaryIO, cast
from urllib.parse import urlsplit
from urllib.request import url2pathname

from typing_extensions import final, override

from ..system.validation import valid_not_none
from .abc import PathHandle, WritableResource
from .base import AbstractResource
from .exceptions import ResourceIsADirectoryError, ResourceNotFoundError, ResourceNotResolvableError

logger = logging.getLogger(__name__)


def _normalize(path: PurePath) -> Any:
    # Lexical only: symbolic links are not resolved and relative paths stay relative
    normpath = ntpath.normpath if isinstance(path, PureWindowsPath) else posixpath.normpath
    return type(path)(normpath(str(path)))


@final
class PathResource(AbstractResource, WritableResource):
    """Resource backed by a hierarchical path

    The path is normalized once, at construction. Relative resources are built
    *underneath* this path, even when it denotes a file:
    PathResource("/dir1/file"), relative path "dir2" -> "/dir1/file/dir2"

    Paths of other storage providers are accepted as long as they are PurePath
    objects implementing the PathHandle protocol.
    """

    __slots__ = ("__p", "__h", "__weakref__")

    def __init__(self, path: str | os.PathLike[str]) -> None:
        valid_not_none(path, name="Path")
        handle: PathHandle
        if isinstance(path, PurePath) and isinstance(path, PathHandle):
            handle = path
        else:
            handle = Path(path)
        self.__p: PathHandle = _normalize(cast(PurePath, handle))

    @classmethod
    def from_uri(cls, uri: str) -> PathResource:
        valid_not_none(uri, name="URI")
        parts = urlsplit(uri)
        if parts.scheme.lower() != "file":
            raise ValueError(f"Unsupported URI scheme: {uri!r}")
        if parts.netloc not in ("", "localhost"):
            raise ValueError(f"URI has an authority component: {uri!r}")
        return cls(url2pathname(parts.path))

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.path!r})>"

    @override
    def __eq__(self, __o: object, /) -> bool:
        if not isinstance(__o, PathResource):
            return NotImplemented
        # Paths of different providers never denote the same location
        return type(__o.__p) is type(self.__p) and __o.__p == self.__p

    @override
    def __hash__(self) -> int:
        self.__h: int
        try:
            return self.__h
        except AttributeError:
            self.__h = h = hash(self.__p)
            return h

    @property
    def path(self) -> str:
        return str(self.__p)

    @override
    def exists(self) -> bool:
        try:
            return self.__p.exists()
        except OSError as exc:
            # e.g. name too long, or a parent directory that cannot be searched
            logger.debug("Cannot probe existence of %s: %s", self.path, exc)
            return False

    @override
    def is_readable(self) -> bool:
        return self.__access(os.R_OK) and not self.__p.is_dir()

    @override
    def is_writable(self) -> bool:
        return self.__access(os.W_OK) and not self.__p.is_dir()

    def __access(self, mode: int) -> bool:
        try:
            native_path = os.fspath(self.__p)
        except (TypeError, NotImplementedError, io.UnsupportedOperation):
            # No permission probe without a native path, existence is all we can check
            return self.__p.exists()
        return os.access(native_path, mode)

    @override
    def open(self) -> BinaryIO:
        if not self.exists():
            raise ResourceNotFoundError(self.path)
        if self.__p.is_dir():
            raise ResourceIsADirectoryError(self.path)
        logger.debug("Opening %s for reading", self.description)
        return cast(BinaryIO, self.__p.open("rb"))

    @override
    def open_output(self) -> BinaryIO:
        if self.__p.is_dir():
            raise ResourceIsADirectoryError(self.path)
        logger.debug("Opening %s for writing", self.description)
        return cast(BinaryIO, self.__p.open("wb"))

    @override
    def get_url(self) -> str:
        return self.get_uri()

    @override
    def get_uri(self) -> str:
        return self.__p.absolute().as_uri()

    @override
    def get_file(self) -> Path:
        try:
            return Path(os.fspath(self.__p))
        except (TypeError, NotImplementedError, io.UnsupportedOperation) as exc:
            # Only paths of the default filesystem can be converted to a native file path
            logger.debug("%s has no native file path: %s", self.path, exc)
            raise ResourceNotResolvableError(self.path) from exc

    @override
    def content_length(self) -> int:
        return self.__p.stat().st_size

    @override
    def last_modified(self) -> float:
        # Not through get_file(): some providers cannot be converted to a native file path
        return self.__p.stat().st_mtime

    @override
    def create_relative(self, relative_path: str) -> PathResource:
        valid_not_none(relative_path, name="Relative path")
        return PathResource(self.__p.joinpath(relative_path))

    @property
    @override
    def filename(self) -> str:
        return self.__p.name

    @property
    @override
    def description(self) -> str:
        return f"path [{self.__p.absolute()}]"
