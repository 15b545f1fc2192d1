# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
import pathlib
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pytest import MonkeyPatch


################################## fixtures ##################################


@pytest.fixture(scope="session")
def resourceio_rootdirs_list() -> list[pathlib.Path]:
    import importlib

    resourceio_spec = importlib.import_module("resourceio").__spec__
    assert resourceio_spec is not None
    assert resourceio_spec.submodule_search_locations is not None

    return [pathlib.Path(path) for path in resourceio_spec.submodule_search_locations]


################################## Auto used fixtures for all session test ##################################


@pytest.fixture(autouse=True)
def __clear_resourceio_environment(monkeypatch: MonkeyPatch) -> None:
    """
    Settings are read from the environment at call time: do not let the developer's environment leak into the tests
    """
    for name in tuple(os.environ):
        if name.startswith("RESOURCEIO_"):
            monkeypatch.delenv(name)
