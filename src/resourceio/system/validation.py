# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Generic validator functions module"""

from __future__ import annotations

__all__ = [
    "valid_float",
    "valid_integer",
    "valid_not_none",
]

from functools import cache
from typing import Any, Callable, TypeAlias, TypeVar, overload

_T = TypeVar("_T")

_MISSING: Any = object()


def valid_not_none(value: _T | None, *, name: str) -> _T:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


@overload
def valid_integer(*, min_value: int = ..., max_value: int = ...) -> Callable[[Any], int]:
    ...


@overload
def valid_integer(*, value: Any, min_value: int = ..., max_value: int = ...) -> int:
    ...


def valid_integer(**kwargs: Any) -> int | Callable[[Any], int]:
    value: Any = kwargs.pop("value", _MISSING)
    validator: Callable[[Any], int] = __valid_number(int, **kwargs)
    if value is not _MISSING:
        return validator(value)
    return validator


@overload
def valid_float(*, min_value: float = ..., max_value: float = ...) -> Callable[[Any], float]:
    ...


@overload
def valid_float(*, value: Any, min_value: float = ..., max_value: float = ...) -> float:
    ...


def valid_float(**kwargs: Any) -> float | Callable[[Any], float]:
    value: Any = kwargs.pop("value", _MISSING)
    validator: Callable[[Any], float] = __valid_number(float, **kwargs)
    if value is not _MISSING:
        return validator(value)
    return validator


_Number: TypeAlias = int | float


@cache
def __valid_number(value_type: type[_Number], /, **kwargs: Any) -> Callable[[Any], Any]:
    if any(param not in ("min_value", "max_value") for param in kwargs):
        raise TypeError("Invalid arguments")

    min_value: _Number | None = value_type(kwargs["min_value"]) if "min_value" in kwargs else None
    max_value: _Number | None = value_type(kwargs["max_value"]) if "max_value" in kwargs else None

    if min_value is not None and max_value is not None and min_value > max_value:
        raise ValueError(f"min_value ({min_value}) > max_value ({max_value})")

    def valid_number(val: Any) -> _Number:
        if val is None or isinstance(val, bool):
            raise TypeError(f"Expected {value_type.__name__}, got {val!r}")
        number: _Number = value_type(val)
        if min_value is not None and number < min_value:
            raise ValueError(f"{number} < {min_value}")
        if max_value is not None and number > max_value:
            raise ValueError(f"{number} > {max_value}")
        return number

    return valid_number
