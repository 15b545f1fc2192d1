# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Include/exclude instance filter module"""

from __future__ import annotations

__all__ = ["InstanceFilter"]

import operator
from typing import Any, Callable, Generic, Iterable, TypeVar

from .validation import valid_not_none

_T = TypeVar("_T")


class InstanceFilter(Generic[_T]):
    """Checks whether an instance matches a collection of includes and excludes

    An instance matches if it matches one of the includes and none of the excludes.
    When only one of the collections is populated, only this one is taken into account.
    When both collections are empty, 'match_if_empty' is the answer.

    Matching a single candidate uses 'predicate' (equality by default). Subclasses can
    override match_candidate() instead; the include/exclude combination stays the same.
    """

    __slots__ = ("__includes", "__excludes", "__match_if_empty", "__predicate")

    def __init__(
        self,
        includes: Iterable[_T] | None,
        excludes: Iterable[_T] | None,
        match_if_empty: bool,
        *,
        predicate: Callable[[_T, _T], bool] | None = None,
    ) -> None:
        self.__includes: tuple[_T, ...] = tuple(includes) if includes is not None else ()
        self.__excludes: tuple[_T, ...] = tuple(excludes) if excludes is not None else ()
        self.__match_if_empty: bool = bool(match_if_empty)
        self.__predicate: Callable[[_T, _T], bool] = predicate if predicate is not None else operator.eq

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(includes={list(self.__includes)!r}, "
            f"excludes={list(self.__excludes)!r}, match_if_empty={self.__match_if_empty!r})"
        )

    def __call__(self, instance: _T) -> bool:
        return self.match(instance)

    def match(self, instance: _T) -> bool:
        valid_not_none(instance, name="The instance to match")

        includes_set: bool = len(self.__includes) > 0
        excludes_set: bool = len(self.__excludes) > 0
        if not includes_set and not excludes_set:
            return self.__match_if_empty

        match_includes: bool = self.match_any(instance, self.__includes)
        match_excludes: bool = self.match_any(instance, self.__excludes)

        if not includes_set:
            return not match_excludes
        if not excludes_set:
            return match_includes
        return match_includes and not match_excludes

    def match_candidate(self, instance: _T, candidate: _T) -> bool:
        return bool(self.__predicate(instance, candidate))

    def match_any(self, instance: _T, candidates: Iterable[_T]) -> bool:
        return any(self.match_candidate(instance, candidate) for candidate in candidates)

    @property
    def includes(self) -> tuple[_T, ...]:
        return self.__includes

    @property
    def excludes(self) -> tuple[_T, ...]:
        return self.__excludes

    @property
    def match_if_empty(self) -> bool:
        return self.__match_if_empty

    @property
    def predicate(self) -> Callable[[Any, Any], bool]:
        return self.__predicate
