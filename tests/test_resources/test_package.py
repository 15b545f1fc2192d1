# -*- coding: Utf-8 -*-

from __future__ import annotations

import importlib
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING

from resourceio.resources.exceptions import ResourceIsADirectoryError, ResourceNotFoundError, ResourceNotResolvableError
from resourceio.resources.package import PackageResource

import pytest

from ..mock.sys import unload_module

if TYPE_CHECKING:
    from pytest import MonkeyPatch

PACKAGE_NAME = "resourceio_tests_fake_package"
ZIPPED_PACKAGE_NAME = "resourceio_tests_zipped_package"


@pytest.fixture
def package_root(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    root = tmp_path / "site" / PACKAGE_NAME
    (root / "data").mkdir(parents=True)
    (root / "__init__.py").write_text("")
    (root / "data" / "config.txt").write_bytes(b"key=value\n")
    (root / "data" / "other.txt").write_bytes(b"other")
    (root / "top.txt").write_bytes(b"top")
    unload_module(PACKAGE_NAME, True, monkeypatch)
    monkeypatch.syspath_prepend(str(root.parent))
    return root


@pytest.fixture
def zipped_package(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    archive = tmp_path / "package.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr(f"{ZIPPED_PACKAGE_NAME}/__init__.py", "")
        zf.writestr(f"{ZIPPED_PACKAGE_NAME}/data.bin", b"\x00\x01\x02")
    unload_module(ZIPPED_PACKAGE_NAME, True, monkeypatch)
    monkeypatch.syspath_prepend(str(archive))
    return archive


class TestPackageResourceConstruction:
    @pytest.mark.parametrize(
        ["given_path", "normalized_path"],
        [
            pytest.param("data/config.txt", "data/config.txt", id="already-normalized"),
            pytest.param("/data/config.txt", "data/config.txt", id="leading-slash"),
            pytest.param("data//./config.txt", "data/config.txt", id="dot-and-duplicate-separators"),
            pytest.param("data\\config.txt", "data/config.txt", id="backslashes"),
            pytest.param("data/../top.txt", "top.txt", id="parent-segment"),
            pytest.param(".", "", id="package-root"),
        ],
    )
    def test____dunder_init____normalizes_path(self, given_path: str, normalized_path: str) -> None:
        # Arrange

        # Act
        resource = PackageResource(PACKAGE_NAME, given_path)

        # Assert
        assert resource.path == normalized_path
        assert resource == PackageResource(PACKAGE_NAME, normalized_path)

    def test____dunder_init____does_not_import_the_package(self) -> None:
        # Arrange

        # Act
        resource = PackageResource("resourceio_tests_unknown_package", "file.txt")

        # Assert
        assert resource.package == "resourceio_tests_unknown_package"

    @pytest.mark.parametrize(["package", "path"], [(None, "file.txt"), (PACKAGE_NAME, None)])
    def test____dunder_init____None_is_a_precondition_violation(self, package: str | None, path: str | None) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError, match=r"must not be None$"):
            PackageResource(package, path)  # type: ignore[arg-type]

    def test____dunder_eq____module_or_module_name(self, package_root: Path) -> None:
        # Arrange
        module = importlib.import_module(PACKAGE_NAME)

        # Act
        from_module = PackageResource(module, "data/config.txt")
        from_name = PackageResource(PACKAGE_NAME, "data/config.txt")

        # Assert
        assert from_module.package == PACKAGE_NAME
        assert from_module == from_name
        assert hash(from_module) == hash(from_name)

    def test____dunder_eq____different_package_or_path(self) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "a.txt")

        # Act & Assert
        assert resource != PackageResource(PACKAGE_NAME, "b.txt")
        assert resource != PackageResource("other_package", "a.txt")

    def test____description____package_and_path(self) -> None:
        # Arrange

        # Act & Assert
        assert PackageResource(PACKAGE_NAME, "data/config.txt").description == f"package resource [{PACKAGE_NAME}:data/config.txt]"

    def test____filename____last_path_segment(self) -> None:
        # Arrange

        # Act & Assert
        assert PackageResource(PACKAGE_NAME, "data/config.txt").filename == "config.txt"
        assert PackageResource(PACKAGE_NAME, "").filename is None


class TestPackageResourceQueries:
    def test____exists____file_directory_and_missing(self, package_root: Path) -> None:
        # Arrange

        # Act & Assert
        assert PackageResource(PACKAGE_NAME, "data/config.txt").exists()
        assert PackageResource(PACKAGE_NAME, "data").exists()
        assert PackageResource(PACKAGE_NAME, "").exists()
        assert not PackageResource(PACKAGE_NAME, "data/missing.txt").exists()

    def test____exists____unknown_package(self) -> None:
        # Arrange

        # Act & Assert
        assert not PackageResource("resourceio_tests_unknown_package", "file.txt").exists()

    def test____is_readable____only_files(self, package_root: Path) -> None:
        # Arrange

        # Act & Assert
        assert PackageResource(PACKAGE_NAME, "data/config.txt").is_readable()
        assert not PackageResource(PACKAGE_NAME, "data").is_readable()
        assert not PackageResource(PACKAGE_NAME, "data/missing.txt").is_readable()

    def test____content_length____size_of_the_content(self, package_root: Path) -> None:
        # Arrange

        # Act & Assert
        assert PackageResource(PACKAGE_NAME, "data/config.txt").content_length() == len(b"key=value\n")

    def test____last_modified____timestamp_of_the_file(self, package_root: Path) -> None:
        # Arrange
        file = package_root / "data" / "config.txt"

        # Act
        last_modified = PackageResource(PACKAGE_NAME, "data/config.txt").last_modified()

        # Assert
        assert last_modified == file.stat().st_mtime

    def test____get_file____file_of_the_installed_package(self, package_root: Path) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "data/config.txt")

        # Act
        file = resource.get_file()

        # Assert
        assert file == package_root / "data" / "config.txt"

    def test____get_uri____file_uri_of_the_installed_package(self, package_root: Path) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "data/config.txt")

        # Act
        uri = resource.get_uri()

        # Assert
        assert uri == (package_root / "data" / "config.txt").as_uri()
        assert resource.get_url() == uri

    def test____get_file____unknown_package(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ResourceNotFoundError):
            PackageResource("resourceio_tests_unknown_package", "file.txt").get_file()

    def test____as_file____yields_the_installed_file(self, package_root: Path) -> None:
        # Arrange

        # Act
        with PackageResource(PACKAGE_NAME, "data/config.txt").as_file() as file:
            # Assert
            assert file.read_bytes() == b"key=value\n"


class TestPackageResourceStreams:
    def test____open____returns_content(self, package_root: Path) -> None:
        # Arrange

        # Act
        with PackageResource(PACKAGE_NAME, "data/config.txt").open() as stream:
            content = stream.read()

        # Assert
        assert content == b"key=value\n"

    def test____open____directory(self, package_root: Path) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ResourceIsADirectoryError):
            PackageResource(PACKAGE_NAME, "data").open()

    def test____open____missing_resource(self, package_root: Path) -> None:
        # Arrange

        # Act
        with pytest.raises(ResourceNotFoundError) as exc_info:
            PackageResource(PACKAGE_NAME, "data/missing.txt").open()

        # Assert
        assert not isinstance(exc_info.value, ResourceIsADirectoryError)

    def test____open____unknown_package(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ResourceNotFoundError):
            PackageResource("resourceio_tests_unknown_package", "file.txt").open()


class TestPackageResourceCreateRelative:
    def test____create_relative____sibling_resource(self, package_root: Path) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "data/config.txt")

        # Act
        relative = resource.create_relative("other.txt")

        # Assert
        assert relative == PackageResource(PACKAGE_NAME, "data/other.txt")
        with relative.open() as stream:
            assert stream.read() == b"other"

    def test____create_relative____parent_segment(self, package_root: Path) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "data/config.txt")

        # Act
        relative = resource.create_relative("../top.txt")

        # Assert
        assert relative.path == "top.txt"
        assert relative.exists()

    def test____create_relative____keeps_the_package(self) -> None:
        # Arrange
        resource = PackageResource(PACKAGE_NAME, "config.txt")

        # Act
        relative = resource.create_relative("/other.txt")

        # Assert
        assert relative.package == PACKAGE_NAME
        assert relative.path == "other.txt"


class TestPackageResourceInArchive:
    def test____open____reads_from_the_archive(self, zipped_package: Path) -> None:
        # Arrange
        resource = PackageResource(ZIPPED_PACKAGE_NAME, "data.bin")

        # Act
        with resource.open() as stream:
            content = stream.read()

        # Assert
        assert resource.exists()
        assert content == b"\x00\x01\x02"
        assert resource.content_length() == 3

    def test____get_file____not_resolvable(self, zipped_package: Path) -> None:
        # Arrange
        resource = PackageResource(ZIPPED_PACKAGE_NAME, "data.bin")

        # Act & Assert
        with pytest.raises(ResourceNotResolvableError):
            resource.get_file()
        with pytest.raises(ResourceNotResolvableError, match=r"cannot be resolved to URI$"):
            resource.get_uri()

    def test____as_file____extracts_a_temporary_copy(self, zipped_package: Path) -> None:
        # Arrange
        resource = PackageResource(ZIPPED_PACKAGE_NAME, "data.bin")

        # Act
        with resource.as_file() as file:
            content = file.read_bytes()

        # Assert
        assert content == b"\x00\x01\x02"
