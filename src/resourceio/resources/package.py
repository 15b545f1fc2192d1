# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Python package resource module"""

from __future__ import annotations

__all__ = [
    "PackageResource",
    "PackageType",
]

import importlib.resources as _importlib_resources
import logging
import posixpath
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, BinaryIO, ContextManager, TypeAlias, cast

from typing_extensions import final, override

from ..system.validation import valid_not_none
from .base import AbstractResource
from .exceptions import ResourceIsADirectoryError, ResourceNotFoundError, ResourceNotResolvableError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

PackageType: TypeAlias = str | ModuleType

logger = logging.getLogger(__name__)


@final
class PackageResource(AbstractResource):
    """Resource shipped inside an importable Python package

    The resource is looked up lazily through importlib.resources, so the package is
    only imported when an operation needs it. Relative resources are resolved against
    the directory containing this resource.
    """

    __slots__ = ("__pkg", "__r", "__h", "__weakref__")

    def __init__(self, package: PackageType, resource: str) -> None:
        valid_not_none(package, name="Package")
        valid_not_none(resource, name="Resource path")
        resource = posixpath.normpath(resource.replace("\\", "/")).lstrip("/")
        if resource == ".":
            resource = ""
        self.__pkg: PackageType = package
        self.__r: str = resource

    @override
    def __eq__(self, __o: object, /) -> bool:
        if not isinstance(__o, PackageResource):
            return NotImplemented
        return __o.package == self.package and __o.__r == self.__r

    @override
    def __hash__(self) -> int:
        self.__h: int
        try:
            return self.__h
        except AttributeError:
            self.__h = h = hash((type(self), self.package, self.__r))
            return h

    @property
    def package(self) -> str:
        package = self.__pkg
        if isinstance(package, ModuleType):
            return package.__name__
        return package

    @property
    def path(self) -> str:
        return self.__r

    def __traversable(self) -> Traversable:
        try:
            root = _importlib_resources.files(self.__pkg)
        except (ImportError, TypeError) as exc:
            logger.debug("Cannot look up resources of package %r: %s", self.package, exc)
            raise ResourceNotFoundError(self.description) from exc
        if not self.__r:
            return root
        return root.joinpath(self.__r)

    @override
    def exists(self) -> bool:
        try:
            traversable = self.__traversable()
        except ResourceNotFoundError:
            return False
        return traversable.is_file() or traversable.is_dir()

    @override
    def is_readable(self) -> bool:
        try:
            traversable = self.__traversable()
        except ResourceNotFoundError:
            return False
        return traversable.is_file()

    @override
    def open(self) -> BinaryIO:
        traversable = self.__traversable()
        if not traversable.is_file():
            if traversable.is_dir():
                raise ResourceIsADirectoryError(self.description)
            raise ResourceNotFoundError(self.description)
        logger.debug("Opening %s for reading", self.description)
        return cast(BinaryIO, traversable.open("rb"))

    @override
    def get_uri(self) -> str:
        try:
            return self.get_file().as_uri()
        except ResourceNotResolvableError as exc:
            raise ResourceNotResolvableError(self.description, "URI") from exc

    @override
    def get_file(self) -> Path:
        traversable = self.__traversable()
        if not isinstance(traversable, Path):
            # e.g. the package is imported from a zip archive
            raise ResourceNotResolvableError(self.description)
        return traversable

    @override
    def as_file(self) -> ContextManager[Path]:
        return _importlib_resources.as_file(self.__traversable())

    @override
    def create_relative(self, relative_path: str) -> PackageResource:
        valid_not_none(relative_path, name="Relative path")
        return PackageResource(self.__pkg, posixpath.join(posixpath.dirname(self.__r), relative_path.lstrip("/")))

    @property
    @override
    def filename(self) -> str | None:
        return posixpath.basename(self.__r) or None

    @property
    @override
    def description(self) -> str:
        return f"package resource [{self.package}:{self.__r}]"
