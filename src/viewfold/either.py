# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Two-case tagged union used to route events between combined views.

An ``Either[L, R]`` value is exactly one of ``Left(value)`` or ``Right(value)``.
Consumers branch on it with structural pattern matching::

    match event:
        case Left(value):
            ...
        case Right(value):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Left(Generic[L]):
    """The first case of an ``Either``."""

    value: L

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_left(self.value)


@dataclass(frozen=True, slots=True)
class Right(Generic[R]):
    """The second case of an ``Either``."""

    value: R

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)


Either: TypeAlias = Union[Left[L], Right[R]]


def is_left(value: Either[L, R]) -> bool:
    """Return True when ``value`` is the first case."""
    return isinstance(value, Left)


def is_right(value: Either[L, R]) -> bool:
    """Return True when ``value`` is the second case."""
    return isinstance(value, Right)
