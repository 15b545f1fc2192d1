# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""URL resource module"""

from __future__ import annotations

__all__ = ["UrlResource"]

import logging
import posixpath
from email.message import Message
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import BinaryIO, Final, cast
from urllib.error import HTTPError
from urllib.parse import unquote, urljoin, urlsplit, urlunsplit
from urllib.request import Request, url2pathname, urlopen

from typing_extensions import final, override

from ..environ.config import get_url_timeout
from ..system.validation import valid_not_none
from .base import AbstractResource
from .exceptions import ResourceError, ResourceNotFoundError
from .path import PathResource

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUS: Final[frozenset[int]] = frozenset({404, 410})


@final
class UrlResource(AbstractResource):
    """Resource located by an absolute URL

    'file:' URLs are served from the local filesystem with the same rules as PathResource.
    Relative resources are resolved against the URL, i.e. relative to its parent "directory".
    """

    __slots__ = ("__u", "__h", "__weakref__")

    def __init__(self, url: str) -> None:
        valid_not_none(url, name="URL")
        parts = urlsplit(url)
        if not parts.scheme:
            raise ValueError(f"URL must be absolute: {url!r}")
        if parts.path:
            cleaned_path = posixpath.normpath(parts.path)
            if parts.path.endswith("/") and not cleaned_path.endswith("/"):
                cleaned_path += "/"
            parts = parts._replace(path=cleaned_path)
        self.__u: str = urlunsplit(parts)

    @override
    def __eq__(self, __o: object, /) -> bool:
        if not isinstance(__o, UrlResource):
            return NotImplemented
        return __o.__u == self.__u

    @override
    def __hash__(self) -> int:
        self.__h: int
        try:
            return self.__h
        except AttributeError:
            self.__h = h = hash((type(self), self.__u))
            return h

    @property
    def url(self) -> str:
        return self.__u

    def __is_file_url(self) -> bool:
        parts = urlsplit(self.__u)
        return parts.scheme.lower() == "file" and parts.netloc in ("", "localhost")

    def __path_resource(self) -> PathResource:
        return PathResource(url2pathname(urlsplit(self.__u).path))

    def __request(self, method: str) -> Message:
        logger.debug("%s %s", method, self.__u)
        try:
            with urlopen(Request(self.__u, method=method), timeout=get_url_timeout()) as response:
                return response.headers
        except HTTPError as exc:
            if exc.code in _NOT_FOUND_STATUS:
                exc.close()
                raise ResourceNotFoundError(self.__u) from exc
            raise

    @override
    def exists(self) -> bool:
        if self.__is_file_url():
            return self.__path_resource().exists()
        try:
            self.__request("HEAD")
        except OSError as exc:
            logger.debug("%s is not reachable: %s", self.__u, exc)
            return False
        return True

    @override
    def is_readable(self) -> bool:
        if self.__is_file_url():
            return self.__path_resource().is_readable()
        return self.exists()

    @override
    def open(self) -> BinaryIO:
        if self.__is_file_url():
            return self.__path_resource().open()
        logger.debug("GET %s", self.__u)
        try:
            return cast(BinaryIO, urlopen(self.__u, timeout=get_url_timeout()))
        except HTTPError as exc:
            if exc.code in _NOT_FOUND_STATUS:
                exc.close()
                raise ResourceNotFoundError(self.__u) from exc
            raise

    @override
    def get_uri(self) -> str:
        return self.__u

    @override
    def get_file(self) -> Path:
        if self.__is_file_url():
            return self.__path_resource().get_file()
        return super().get_file()

    @override
    def content_length(self) -> int:
        if self.__is_file_url():
            return self.__path_resource().content_length()
        content_length = self.__request("HEAD").get("Content-Length")
        if content_length is not None and content_length.strip().isdigit():
            return int(content_length)
        return super().content_length()

    @override
    def last_modified(self) -> float:
        if self.__is_file_url():
            return self.__path_resource().last_modified()
        last_modified = self.__request("HEAD").get("Last-Modified")
        if not last_modified:
            raise ResourceError(f"{self.description} has no last modification date")
        try:
            return parsedate_to_datetime(last_modified).timestamp()
        except (TypeError, ValueError) as exc:
            raise ResourceError(f"{self.description} has an invalid last modification date: {last_modified!r}") from exc

    @override
    def create_relative(self, relative_path: str) -> UrlResource:
        valid_not_none(relative_path, name="Relative path")
        return UrlResource(urljoin(self.__u, relative_path.lstrip("/")))

    @property
    @override
    def filename(self) -> str | None:
        return unquote(posixpath.basename(urlsplit(self.__u).path)) or None

    @property
    @override
    def description(self) -> str:
        return f"URL [{self.__u}]"
