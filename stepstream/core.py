"""
Core stream transformations.

Each transformation wraps one or more upstream streams in a closure and
returns that closure as a new stream. Nothing is evaluated until a
consumer starts calling the outermost stream.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from .protocols import DONE, Done, More, Stream, is_unbounded, mark_unbounded
from .records import Pair

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")


def mapped(stream: Stream[T], func: Callable[[T], U]) -> Stream[U]:
    """
    Apply a function to each element of a stream.

    ``func`` runs exactly once per produced element, in upstream order.

    Args:
        stream: The upstream stream
        func: Function to apply to each element

    Returns:
        A stream of transformed elements
    """

    def advance() -> More[U] | Done:
        step = stream()
        if isinstance(step, Done):
            return DONE
        return More(func(step.value))

    return mark_unbounded(advance, is_unbounded(stream))


def filtered(stream: Stream[T], predicate: Callable[[T], bool]) -> Stream[T]:
    """
    Keep only the elements for which ``predicate`` holds.

    Each advance pulls from upstream until a matching element is found or
    upstream is exhausted, so rejected elements are skipped rather than
    ending the stream.

    Args:
        stream: The upstream stream
        predicate: Function that returns True for elements to keep

    Returns:
        A stream of the matching elements
    """

    def advance() -> More[T] | Done:
        step = stream()
        while isinstance(step, More):
            if predicate(step.value):
                return step
            step = stream()
        return DONE

    return mark_unbounded(advance, is_unbounded(stream))


def zipped(a: Stream[A], b: Stream[B]) -> Stream[Pair[A, B]]:
    """
    Pair up the elements of two streams positionally.

    ``a`` is advanced first; if it is exhausted ``b`` is left untouched.
    The result ends as soon as either side ends and never advances either
    side again afterwards.

    Args:
        a: Stream supplying the first component
        b: Stream supplying the second component

    Returns:
        A stream of ``Pair(first, second)``
    """
    exhausted = False

    def advance() -> More[Pair[A, B]] | Done:
        nonlocal exhausted
        if exhausted:
            return DONE
        step_a = a()
        if isinstance(step_a, Done):
            exhausted = True
            return DONE
        step_b = b()
        if isinstance(step_b, Done):
            exhausted = True
            return DONE
        return More(Pair(step_a.value, step_b.value))

    return mark_unbounded(advance, is_unbounded(a) and is_unbounded(b))


def chained(*streams: Stream[T]) -> Stream[T]:
    """
    Concatenate streams, draining each before moving to the next.

    Args:
        *streams: Streams of the same element type, in order

    Returns:
        A stream that ends only when every input has ended
    """
    position = 0

    def advance() -> More[T] | Done:
        nonlocal position
        while position < len(streams):
            step = streams[position]()
            if isinstance(step, More):
                return step
            position += 1
            logger.debug(
                "Chained input %d of %d exhausted", position, len(streams)
            )
        return DONE

    return mark_unbounded(advance, any(is_unbounded(s) for s in streams))


def fused(stream: Stream[T]) -> Stream[T]:
    """
    Latch exhaustion: after the first ``DONE``, upstream is never called again.
    """
    exhausted = False

    def advance() -> More[T] | Done:
        nonlocal exhausted
        if exhausted:
            return DONE
        step = stream()
        if isinstance(step, Done):
            exhausted = True
        return step

    return mark_unbounded(advance, is_unbounded(stream))


def limited(stream: Stream[T], n: int) -> Stream[T]:
    """
    Yield at most ``n`` elements of a stream, lazily.

    Once ``n`` elements have been produced upstream is not advanced again.
    A non-positive ``n`` gives an empty stream.

    Args:
        stream: The upstream stream
        n: Maximum number of elements

    Returns:
        A bounded stream
    """
    remaining = max(0, n)

    def advance() -> More[T] | Done:
        nonlocal remaining
        if remaining == 0:
            return DONE
        step = stream()
        if isinstance(step, Done):
            remaining = 0
            return DONE
        remaining -= 1
        return step

    return advance
