"""
Core protocol definitions for lazy streams.

A stream is nothing more than a zero-argument callable that, each time it
is invoked, advances its own private position and returns a step outcome:
either ``More(value)`` or the ``DONE`` marker. There is no third outcome;
failures must travel inside the element type.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Final, Generic, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)  # Covariant for Stream (output only)


@dataclass(frozen=True, slots=True)
class More(Generic[T]):
    """A step outcome carrying one produced element."""

    value: T


class Done:
    """
    The step outcome signalling exhaustion.

    There is exactly one instance, ``DONE``; compare with ``is``.
    """

    _instance: Done | None = None

    __slots__ = ()

    def __new__(cls) -> Done:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DONE"

    def __bool__(self) -> bool:
        return False


DONE: Final = Done()

type Step[T] = More[T] | Done


class Stream(Protocol[T_co]):
    """
    A lazily produced, single-consumer sequence of values.

    Anything callable with no arguments that returns a step outcome
    conforms; plain closures are the usual implementation.
    """

    @abstractmethod
    def __call__(self) -> More[T_co] | Done:
        """
        Advance the stream by one position.

        Returns:
            ``More(value)`` for the next element, or ``DONE`` once the
            stream is exhausted
        """
        ...


def more[T](value: T) -> More[T]:
    """Wrap a value as a ``More`` step outcome."""
    return More(value)


# Attribute set on stream callables known to never exhaust.
UNBOUNDED_ATTR = "__stepstream_unbounded__"


def mark_unbounded[S](stream: S, unbounded: bool = True) -> S:
    """Record whether ``stream`` is known to never return ``DONE``."""
    if unbounded:
        setattr(stream, UNBOUNDED_ATTR, True)
    return stream


def is_unbounded(stream: Any) -> bool:
    """
    Return True if ``stream`` is known to never exhaust.

    Only streams built from ``iota``/``infinite`` (and transformations that
    cannot bound them) are marked; an unmarked stream may still be infinite.
    """
    return bool(getattr(stream, UNBOUNDED_ATTR, False))
