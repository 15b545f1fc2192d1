# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio command line commands module"""

from __future__ import annotations

__all__ = [
    "AbstractCommand",
    "CatCommand",
    "InfoCommand",
    "resolve_resource",
]

import logging
import sys
from abc import ABCMeta, abstractmethod
from argparse import ArgumentParser, Namespace
from datetime import datetime, timezone
from typing import Any, BinaryIO, Callable
from urllib.parse import urlsplit

from ..environ.config import get_buffer_size
from ..resources.abc import Resource
from ..resources.package import PackageResource
from ..resources.path import PathResource
from ..resources.url import UrlResource

logger = logging.getLogger(__name__)


def resolve_resource(location: str, *, package: str | None = None) -> Resource:
    if package is not None:
        return PackageResource(package, location)
    scheme = urlsplit(location).scheme
    # One-letter schemes are Windows drive letters
    if len(scheme) > 1:
        return UrlResource(location)
    return PathResource(location)


class AbstractCommand(metaclass=ABCMeta):
    def __init__(self, stdout: BinaryIO | None = None) -> None:
        self.stdout: BinaryIO = stdout if stdout is not None else sys.stdout.buffer

    @classmethod
    def get_parser_kwargs(cls) -> dict[str, Any]:
        return {}

    @classmethod
    def register_to_parser(cls, parser: ArgumentParser) -> None:
        parser.add_argument("location", help="filesystem path, URL, or resource path inside --package")
        parser.add_argument(
            "-p",
            "--package",
            dest="package",
            default=None,
            help="look up LOCATION inside this importable Python package",
        )

    @abstractmethod
    def run(self, __args: Namespace, /) -> int:
        raise NotImplementedError

    def get_resource(self, args: Namespace) -> Resource:
        resource = resolve_resource(args.location, package=args.package)
        logger.debug("Resolved %r to %s", args.location, resource.description)
        return resource


class CatCommand(AbstractCommand):
    @classmethod
    def get_parser_kwargs(cls) -> dict[str, Any]:
        return {"help": "write the resource content to the standard output"}

    def run(self, __args: Namespace, /) -> int:
        resource = self.get_resource(__args)
        buffer_size = get_buffer_size()
        total = 0
        with resource.open() as stream:
            while chunk := stream.read(buffer_size):
                self.stdout.write(chunk)
                total += len(chunk)
        self.stdout.flush()
        logger.info("%d bytes read from %s", total, resource.description)
        return 0


class InfoCommand(AbstractCommand):
    @classmethod
    def get_parser_kwargs(cls) -> dict[str, Any]:
        return {"help": "print what is known about the resource"}

    def run(self, __args: Namespace, /) -> int:
        resource = self.get_resource(__args)

        def last_modified() -> str:
            return datetime.fromtimestamp(resource.last_modified(), tz=timezone.utc).isoformat()

        fields: dict[str, Callable[[], object]] = {
            "description": lambda: resource.description,
            "exists": resource.exists,
            "readable": resource.is_readable,
            "filename": lambda: resource.filename,
            "content-length": resource.content_length,
            "last-modified": last_modified,
            "uri": resource.get_uri,
        }
        for name, getter in fields.items():
            try:
                value = getter()
            except OSError as exc:
                logger.debug("Cannot compute %s of %s: %s", name, resource.description, exc)
                value = None
            self.stdout.write(f"{name}: {'-' if value is None else value}\n".encode("utf-8"))
        self.stdout.flush()
        return 0
