"""
Consumers that drive streams.

A consumer repeatedly advances a stream and accumulates a result. Every
consumer here is built on one of two loops: the plain left fold in
``reduce`` and the early-terminating loop in ``for_each_control``.
"""

import os
import warnings
from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

from .config import StreamConfig
from .core import mapped, zipped
from .producers import from_range, indices
from .protocols import Done, More, Stream, is_unbounded
from .records import Control

T = TypeVar("T")
R = TypeVar("R")

# Frames inside the package are skipped when attributing warnings.
_PACKAGE_PREFIX = os.path.dirname(__file__) + os.sep


def _warn_if_unbounded(stream: Stream[Any], consumer: str) -> None:
    if is_unbounded(stream) and StreamConfig.global_config().warn_unbounded:
        warnings.warn(
            f"{consumer}() was given a stream that never exhausts and will "
            "not return. Bound it first with take(), limited() or zipped().",
            RuntimeWarning,
            skip_file_prefixes=(_PACKAGE_PREFIX,),
        )


def _fold(stream: Stream[T], initial: R, combine: Callable[[R, T], R]) -> R:
    accumulator = initial
    step = stream()
    while isinstance(step, More):
        accumulator = combine(accumulator, step.value)
        step = stream()
    return accumulator


def for_each(stream: Stream[T], func: Callable[[T], Any]) -> None:
    """
    Call ``func`` on every element until the stream is exhausted.

    Args:
        stream: The stream to drain
        func: Function to execute for each element
    """
    _warn_if_unbounded(stream, "for_each")
    step = stream()
    while isinstance(step, More):
        func(step.value)
        step = stream()


def for_each_control(
    stream: Stream[T], func: Callable[[T], Control | None]
) -> None:
    """
    Call ``func`` on each element until it returns ``Control.BREAK``.

    The element that triggered the break is the last one pulled from the
    stream; the remainder is left untouched. Any other return value,
    including None, continues.

    Args:
        stream: The stream to drive
        func: Callback returning a ``Control`` signal
    """
    step = stream()
    while isinstance(step, More):
        if func(step.value) is Control.BREAK:
            return
        step = stream()


def reduce(stream: Stream[T], initial: R, combine: Callable[[R, T], R]) -> R:
    """
    Left-fold a stream into a single value.

    Args:
        stream: The stream to drain
        initial: Starting accumulator
        combine: Function of (accumulator, element) returning the new
            accumulator

    Returns:
        The final accumulator (``initial`` for an empty stream)

    Example:
        >>> from stepstream import from_range, reduce
        >>> reduce(from_range(0, 1000), 0, lambda acc, x: acc + x)
        499500
    """
    _warn_if_unbounded(stream, "reduce")
    return _fold(stream, initial, combine)


def _append(output: list[T], value: T) -> list[T]:
    output.append(value)
    return output


def collect(stream: Stream[T]) -> list[T]:
    """
    Collect every element of a stream into a list, in production order.
    """
    _warn_if_unbounded(stream, "collect")
    return _fold(stream, [], _append)


def count(stream: Stream[Any]) -> int:
    """Drain a stream and return how many elements it produced."""
    _warn_if_unbounded(stream, "count")
    return _fold(stream, 0, lambda total, _: total + 1)


def take(stream: Stream[T], n: int) -> list[T]:
    """
    Collect at most ``n`` elements from a stream.

    The stream is advanced at most ``n`` times, so any remaining elements
    stay available to later advances. A non-positive ``n`` takes nothing.

    Args:
        stream: The stream to take from (may be unbounded)
        n: Maximum number of elements

    Returns:
        A list of up to ``n`` elements, in order
    """
    # The range goes first so that it, not the stream, ends the zip.
    bounded = zipped(from_range(0, n), stream)
    return _fold(mapped(bounded, lambda pair: pair.second), [], _append)


def fill(destination: MutableSequence[T], stream: Stream[T]) -> int:
    """
    Overwrite the slots of ``destination`` with successive stream elements.

    Stops early if the stream exhausts first, leaving trailing slots as
    they were.

    Args:
        destination: The list (or other mutable sequence) to write into
        stream: The stream supplying values

    Returns:
        The number of slots written
    """
    written = 0

    def write(index: int) -> Control:
        nonlocal written
        step = stream()
        if isinstance(step, Done):
            return Control.BREAK
        destination[index] = step.value
        written += 1
        return Control.CONTINUE

    for_each_control(indices(destination), write)
    return written
