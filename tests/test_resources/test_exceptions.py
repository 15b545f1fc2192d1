# -*- coding: Utf-8 -*-

from __future__ import annotations

import errno
from pathlib import Path

from resourceio.resources.exceptions import (
    ResourceError,
    ResourceIsADirectoryError,
    ResourceNotFoundError,
    ResourceNotResolvableError,
)

import pytest


class TestResourceExceptions:
    @pytest.mark.parametrize(
        "exception_type",
        [ResourceError, ResourceNotFoundError, ResourceIsADirectoryError, ResourceNotResolvableError],
    )
    def test____hierarchy____everything_is_an_os_error(self, exception_type: type[ResourceError]) -> None:
        # Arrange

        # Act & Assert
        assert issubclass(exception_type, OSError)

    def test____hierarchy____not_found_kinds(self) -> None:
        # Arrange

        # Act & Assert
        assert issubclass(ResourceNotFoundError, FileNotFoundError)
        assert issubclass(ResourceIsADirectoryError, ResourceNotFoundError)
        assert issubclass(ResourceNotResolvableError, ResourceNotFoundError)

    @pytest.mark.parametrize("location", ["some/file.txt", Path("some/file.txt")])
    def test____ResourceNotFoundError____from_location(self, location: str | Path) -> None:
        # Arrange

        # Act
        error = ResourceNotFoundError(location)

        # Assert
        assert error.errno == errno.ENOENT
        assert error.filename == "some/file.txt"

    def test____ResourceNotFoundError____os_error_arguments(self) -> None:
        # Arrange

        # Act
        error = ResourceNotFoundError(errno.ENOENT, "Not found", "file.txt")

        # Assert
        assert error.strerror == "Not found"
        assert error.filename == "file.txt"

    def test____ResourceIsADirectoryError____from_location(self) -> None:
        # Arrange

        # Act
        error = ResourceIsADirectoryError("some/dir")

        # Assert
        assert error.errno == errno.EISDIR
        assert error.filename == "some/dir"

    def test____ResourceNotResolvableError____message(self) -> None:
        # Arrange

        # Act
        error = ResourceNotResolvableError("URL [http://example.com]", "URI")

        # Assert
        assert str(error) == "URL [http://example.com] cannot be resolved to URI"
        assert error.location == "URL [http://example.com]"
        assert error.target == "URI"

    def test____ResourceNotResolvableError____default_target(self) -> None:
        # Arrange

        # Act
        error = ResourceNotResolvableError(Path("memory/file"))

        # Assert
        assert str(error) == "memory/file cannot be resolved to absolute file path"
