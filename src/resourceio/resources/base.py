# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Resource base implementation module"""

from __future__ import annotations

__all__ = ["AbstractResource"]

import logging
from abc import abstractmethod
from contextlib import nullcontext
from pathlib import Path
from typing import BinaryIO, ContextManager
from urllib.parse import urlsplit

from ..environ.config import get_buffer_size
from .abc import Resource
from .exceptions import ResourceError, ResourceNotFoundError, ResourceNotResolvableError

logger = logging.getLogger(__name__)


class AbstractResource(Resource):
    """Base class for resources, deriving most of the contract from open() and description

    Subclasses override the derived operations when they have a cheaper native equivalent.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.description!r})>"

    def __str__(self) -> str:
        return self.description

    def __eq__(self, __o: object, /) -> bool:
        if type(__o) is not type(self):
            return NotImplemented
        assert isinstance(__o, AbstractResource)
        return __o.description == self.description

    def __ne__(self, __o: object) -> bool:
        return not (self == __o)

    def __hash__(self) -> int:
        return hash(self.description)

    def exists(self) -> bool:
        try:
            return self.get_file().exists()
        except OSError:
            pass
        try:
            self.open().close()
        except OSError:
            return False
        return True

    def is_readable(self) -> bool:
        return self.exists()

    @abstractmethod
    def open(self) -> BinaryIO:
        raise NotImplementedError

    def get_url(self) -> str:
        uri = self.get_uri()
        if not urlsplit(uri).scheme:
            raise ResourceError(f"{self.description} cannot be resolved to URL")
        return uri

    def get_uri(self) -> str:
        raise ResourceNotResolvableError(self.description, "URI")

    def get_file(self) -> Path:
        raise ResourceNotResolvableError(self.description)

    def as_file(self) -> ContextManager[Path]:
        return nullcontext(self.get_file())

    def content_length(self) -> int:
        buffer_size = get_buffer_size()
        length = 0
        with self.open() as stream:
            while chunk := stream.read(buffer_size):
                length += len(chunk)
        logger.debug("Computed content length of %s by reading the whole stream: %d", self.description, length)
        return length

    def last_modified(self) -> float:
        file = self.get_file()
        try:
            return file.stat().st_mtime
        except FileNotFoundError as exc:
            raise ResourceNotFoundError(file) from exc

    def create_relative(self, relative_path: str) -> Resource:
        raise ResourceNotResolvableError(self.description, "a relative resource")

    @property
    def filename(self) -> str | None:
        return None

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError
