"""
A closable blocking channel for feeding streams from other threads.

Producers ``send`` values and eventually ``close`` the channel; a consumer
drains it through ``receive`` (see ``producers.py``), blocking while the
channel is empty and exhausting once it is both closed and drained.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

from .config import StreamConfig
from .protocols import DONE, Done, More

logger = logging.getLogger(__name__)


class ChannelClosed(RuntimeError):
    """Raised when sending on a channel that has been closed."""


class Channel[T]:
    """
    Thread-safe FIFO with a close signal.

    A capacity of 0 means the channel never blocks senders; otherwise
    ``send`` blocks while ``capacity`` values are buffered.
    """

    def __init__(self, capacity: int | None = None):
        """
        Create a channel.

        Args:
            capacity: Maximum number of buffered values, 0 for unbounded,
                or None to use the configured default

        Raises:
            ValueError: If capacity < 0
        """
        if capacity is None:
            capacity = StreamConfig.global_config().channel_capacity
        if capacity < 0:
            raise ValueError("Channel capacity must be at least 0")

        self.capacity = capacity
        self._buffer: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    def __len__(self) -> int:
        """Return the number of values currently buffered."""
        with self._cond:
            return len(self._buffer)

    @property
    def closed(self) -> bool:
        """True once ``close`` has been called."""
        with self._cond:
            return self._closed

    def send(self, value: T) -> None:
        """
        Append a value, blocking while a bounded channel is full.

        Raises:
            ChannelClosed: If the channel is (or becomes) closed
        """
        with self._cond:
            while (
                not self._closed
                and self.capacity
                and len(self._buffer) >= self.capacity
            ):
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._buffer.append(value)
            self._cond.notify_all()

    def close(self) -> None:
        """Close the channel; values already buffered remain receivable."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            logger.debug(
                "Channel closed with %d buffered values", len(self._buffer)
            )
            self._cond.notify_all()

    def recv(self) -> More[T] | Done:
        """
        Take the next value, blocking until one arrives or the channel closes.

        Returns:
            ``More(value)``, or ``DONE`` once closed and drained
        """
        with self._cond:
            while not self._buffer and not self._closed:
                self._cond.wait()
            if not self._buffer:
                return DONE
            value = self._buffer.popleft()
            # Wake senders blocked on a full buffer
            self._cond.notify_all()
            return More(value)

    def __enter__(self) -> Channel[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
