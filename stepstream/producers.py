"""
Stream sources.

Sources turn something outside the stream world (a range of numbers, a
materialized collection, a channel, a generator function, any Python
iterable) into a stream. Where possible a source is expressed through
other sources and transformations rather than its own cursor logic.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from .channel import Channel
from .core import mapped, zipped
from .protocols import DONE, Done, More, Stream, mark_unbounded
from .records import Indexed

logger = logging.getLogger(__name__)

T = TypeVar("T")


def from_range(start: int, stop: int, step: int = 1) -> Stream[int]:
    """
    Create a stream over a range of integers.

    Like the builtin ``range``: ``start`` is inclusive, ``stop`` exclusive,
    and an empty range (e.g. ``start >= stop`` with a positive step)
    exhausts immediately.

    Args:
        start: Starting value (inclusive)
        stop: Ending value (exclusive)
        step: Step size (default 1)

    Returns:
        A stream of integers

    Raises:
        ValueError: If step is zero

    Example:
        >>> from stepstream import collect, from_range
        >>> collect(from_range(0, 5))
        [0, 1, 2, 3, 4]
    """
    if step == 0:
        raise ValueError("Range step cannot be zero")

    current = start

    def advance() -> More[int] | Done:
        nonlocal current
        if (step > 0 and current >= stop) or (step < 0 and current <= stop):
            return DONE
        value = current
        current += step
        return More(value)

    return advance


def indices(collection: Sequence[object]) -> Stream[int]:
    """Create a stream of the valid indices of a collection."""
    return from_range(0, len(collection))


def elements(collection: Sequence[T]) -> Stream[T]:
    """
    Create a stream over the elements of a materialized collection.

    The length is captured on construction; the elements themselves are
    looked up by index as the stream advances.

    Args:
        collection: A list, tuple, string or other sequence

    Returns:
        A stream yielding each element in index order
    """
    return mapped(indices(collection), collection.__getitem__)


def enumerated(collection: Sequence[T]) -> Stream[Indexed[T]]:
    """
    Create a stream of ``Indexed(index, element)`` records for a collection.

    Example:
        >>> from stepstream import collect, enumerated
        >>> collect(enumerated("xy"))
        [Indexed(index=0, value='x'), Indexed(index=1, value='y')]
    """
    return mapped(
        zipped(indices(collection), elements(collection)),
        lambda pair: Indexed(pair.first, pair.second),
    )


def receive(channel: Channel[T]) -> Stream[T]:
    """
    Create a stream that drains a channel.

    Advancing blocks the calling thread until a value is sent or the
    channel is closed. The stream ends once the channel is closed and
    every buffered value has been received.

    Args:
        channel: The channel to receive from

    Returns:
        A stream of received values
    """
    exhausted = False

    def advance() -> More[T] | Done:
        nonlocal exhausted
        step = channel.recv()
        if isinstance(step, Done) and not exhausted:
            exhausted = True
            logger.debug("Receive stream exhausted: channel closed and drained")
        return step

    return advance


def iota(start: int = 0) -> Stream[int]:
    """
    Create an endless stream of consecutive integers from ``start``.

    The stream never exhausts; bound it with ``take``, ``limited`` or by
    zipping it with a finite stream.
    """
    current = start

    def advance() -> More[int]:
        nonlocal current
        value = current
        current += 1
        return More(value)

    return mark_unbounded(advance)


def infinite(func: Callable[[], T]) -> Stream[T]:
    """
    Create an endless stream by calling ``func`` on every advance.

    The stream never exhausts; bound it with ``take``, ``limited`` or by
    zipping it with a finite stream.

    Args:
        func: Zero-argument generator function

    Returns:
        An unbounded stream of ``func()`` results
    """

    def advance() -> More[T]:
        return More(func())

    return mark_unbounded(advance)


def from_iterable(iterable: Iterable[T]) -> Stream[T]:
    """
    Adapt any Python iterable into a stream.

    The iterator is created immediately but only advanced on demand; once
    it is exhausted the stream keeps returning ``DONE`` without touching
    it again.
    """
    iterator = iter(iterable)
    exhausted = False

    def advance() -> More[T] | Done:
        nonlocal exhausted
        if exhausted:
            return DONE
        try:
            value = next(iterator)
        except StopIteration:
            exhausted = True
            return DONE
        return More(value)

    return advance
