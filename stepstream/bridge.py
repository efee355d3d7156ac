"""
Bridge between streams and Python's iterator protocol.
"""

from collections.abc import Iterator
from typing import TypeVar

from .protocols import More, Stream

T = TypeVar("T")


def iterate(stream: Stream[T]) -> Iterator[T]:
    """
    Yield the elements of a stream as a Python generator.

    The stream is advanced only when the generator is, so breaking out of a
    ``for`` loop leaves the rest of the stream unconsumed.

    Example:
        >>> from stepstream import from_range, iterate
        >>> for value in iterate(from_range(0, 3)):
        ...     print(value)
        0
        1
        2
    """
    step = stream()
    while isinstance(step, More):
        yield step.value
        step = stream()
