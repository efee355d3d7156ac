"""
Adapters for converting standard Python objects into streams.

This module provides the ergonomic interface: ``into_stream`` accepts
ranges, sequences, channels, iterables and existing streams, and
``Pipeline`` offers the combinators as chainable methods.
"""

from __future__ import annotations

from collections.abc import (
    Callable,
    Iterable,
    Iterator,
    MutableSequence,
    Sequence,
)
from typing import Any, TypeVar, overload

from . import consumers
from .bridge import iterate
from .channel import Channel
from .core import chained, filtered, fused, limited, mapped, zipped
from .producers import elements, from_iterable, from_range, iota, receive
from .protocols import Done, More, Stream, is_unbounded, mark_unbounded
from .records import Control, Indexed, Pair

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Pipeline[T]:
    """
    Chainable wrapper around a stream.

    A pipeline is itself a stream (calling it advances the wrapped stream)
    and a Python iterable. Transformation methods return new pipelines;
    terminal methods drive the stream and return a result.
    """

    def __init__(self, stream: Stream[T]):
        """
        Wrap a stream.

        Args:
            stream: The stream to wrap
        """
        self.stream = stream
        mark_unbounded(self, is_unbounded(stream))

    def __call__(self) -> More[T] | Done:
        return self.stream()

    def __iter__(self) -> Iterator[T]:
        return iterate(self.stream)

    # Transformations

    def map(self, func: Callable[[T], U]) -> Pipeline[U]:
        """Apply a function to each element."""
        return Pipeline(mapped(self.stream, func))

    def filter(self, predicate: Callable[[T], bool]) -> Pipeline[T]:
        """Keep only elements matching the predicate."""
        return Pipeline(filtered(self.stream, predicate))

    def zip(self, other: Stream[U]) -> Pipeline[Pair[T, U]]:
        """Pair this pipeline's elements with those of ``other``."""
        return Pipeline(zipped(self.stream, other))

    def chain(self, *others: Stream[T]) -> Pipeline[T]:
        """Continue with the elements of ``others`` once this one ends."""
        return Pipeline(chained(self.stream, *others))

    def enumerate(self, start: int = 0) -> Pipeline[Indexed[T]]:
        """Attach a running index to each element."""
        return Pipeline(
            mapped(
                zipped(self.stream, iota(start)),
                lambda pair: Indexed(pair.second, pair.first),
            )
        )

    def limit(self, n: int) -> Pipeline[T]:
        """Lazily keep at most ``n`` elements."""
        return Pipeline(limited(self.stream, n))

    def fuse(self) -> Pipeline[T]:
        """Never advance the wrapped stream again once it has ended."""
        return Pipeline(fused(self.stream))

    # Consumers

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Execute a function on each element."""
        consumers.for_each(self.stream, func)

    def for_each_control(self, func: Callable[[T], Control | None]) -> None:
        """Execute a function on each element until it returns BREAK."""
        consumers.for_each_control(self.stream, func)

    def reduce(self, initial: R, combine: Callable[[R, T], R]) -> R:
        """Left-fold all elements into a single value."""
        return consumers.reduce(self.stream, initial, combine)

    def collect(self) -> list[T]:
        """Collect all elements into a list."""
        return consumers.collect(self.stream)

    def take(self, n: int) -> list[T]:
        """Collect at most ``n`` elements."""
        return consumers.take(self.stream, n)

    def fill(self, destination: MutableSequence[T]) -> int:
        """Write elements into ``destination``; return the slots written."""
        return consumers.fill(destination, self.stream)

    def count(self) -> int:
        """Count the elements."""
        return consumers.count(self.stream)


@overload
def into_stream(data: range) -> Stream[int]: ...


@overload
def into_stream(data: Channel[T]) -> Stream[T]: ...


@overload
def into_stream(data: Iterable[T]) -> Stream[T]: ...


@overload
def into_stream(data: Stream[T]) -> Stream[T]: ...


def into_stream(data: Any) -> Stream[Any]:
    """
    Convert a Python object into a stream.

    Ranges keep their bounds and step, sequences are read by index,
    channels are received from, and any other iterable is consumed through
    its iterator. Callables other than classes are trusted to already be
    streams; a class such as ``list`` is rejected.

    Args:
        data: A range, sequence, channel, stream or iterable

    Returns:
        A stream over the data

    Raises:
        TypeError: If the data type is not supported

    Example:
        >>> from stepstream import collect, into_stream
        >>> collect(into_stream((1, 2, 3)))
        [1, 2, 3]
    """
    if isinstance(data, range):
        return from_range(data.start, data.stop, data.step)
    elif isinstance(data, Channel):
        return receive(data)
    elif isinstance(data, Sequence):
        return elements(data)
    elif callable(data) and not isinstance(data, type):
        return data
    elif isinstance(data, Iterable):
        return from_iterable(data)
    raise TypeError(
        f"Cannot convert {type(data).__name__!r} into a stream"
    )


def pipe(data: Any) -> Pipeline[Any]:
    """
    Wrap any supported object in a ``Pipeline``.

    Example:
        >>> from stepstream import pipe
        >>> pipe(range(10)).filter(lambda x: x % 2).map(lambda x: x * x).collect()
        [1, 9, 25, 49, 81]
    """
    if isinstance(data, Pipeline):
        return data
    return Pipeline(into_stream(data))
