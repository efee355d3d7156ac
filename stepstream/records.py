"""
Small value types carried by streams and consumer callbacks.
"""

from enum import Enum
from typing import Generic, NamedTuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


class Pair(NamedTuple, Generic[A, B]):
    """Two positionally aligned values produced by ``zipped``."""

    first: A
    second: B


class Indexed(NamedTuple, Generic[T]):
    """An element of a collection together with its index."""

    index: int
    value: T


class Control(Enum):
    """Signal returned by a ``for_each_control`` callback."""

    BREAK = "break"
    CONTINUE = "continue"
