"""
Configuration for stream consumers and channels.

This module manages the global stream configuration: whether consumers
warn when asked to drain a stream known to be unbounded, and the default
capacity of newly created channels.
"""

from __future__ import annotations

import os
import threading

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class StreamConfig:
    """
    Global configuration for stream evaluation.

    Values are read lazily from the environment the first time they are
    needed and can be overridden at runtime.
    """

    _instance: StreamConfig | None = None
    _lock = threading.Lock()

    def __init__(self):
        self._warn_unbounded: bool | None = None
        self._channel_capacity: int | None = None

    @classmethod
    def global_config(cls) -> StreamConfig:
        """Get the global stream configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = StreamConfig()
        return cls._instance

    def reset(self) -> None:
        """Forget runtime overrides so values are re-read from the environment."""
        with self._lock:
            self._warn_unbounded = None
            self._channel_capacity = None

    @property
    def warn_unbounded(self) -> bool:
        """
        Whether draining consumers warn on streams known to never exhaust.

        Defaults to True; ``STEPSTREAM_WARN_UNBOUNDED`` overrides it.
        """
        if self._warn_unbounded is None:
            env_flag = _parse_flag(
                os.environ.get("STEPSTREAM_WARN_UNBOUNDED", "")
            )
            # Unrecognised values keep the default
            self._warn_unbounded = True if env_flag is None else env_flag
        return self._warn_unbounded

    @warn_unbounded.setter
    def warn_unbounded(self, value: bool) -> None:
        """Enable or disable unbounded-stream warnings."""
        if not isinstance(value, bool):
            raise ValueError("warn_unbounded must be a bool")
        with self._lock:
            self._warn_unbounded = value

    @property
    def channel_capacity(self) -> int:
        """
        Default capacity for new channels (0 means unbounded).

        ``STEPSTREAM_CHANNEL_CAPACITY`` overrides the default.
        """
        if self._channel_capacity is None:
            env_capacity = os.environ.get("STEPSTREAM_CHANNEL_CAPACITY")
            if env_capacity:
                try:
                    capacity = int(env_capacity)
                except ValueError:
                    pass
                else:
                    if capacity >= 0:
                        self._channel_capacity = capacity

            if self._channel_capacity is None:
                self._channel_capacity = 0

        return self._channel_capacity

    @channel_capacity.setter
    def channel_capacity(self, value: int) -> None:
        """Set the default channel capacity."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Channel capacity must be an int")
        if value < 0:
            raise ValueError("Channel capacity must be at least 0")
        with self._lock:
            self._channel_capacity = value


def _parse_flag(value: str) -> bool | None:
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


# Global configuration instance
_global_config = StreamConfig.global_config()


def set_warn_unbounded(enabled: bool) -> None:
    """
    Enable or disable warnings when draining an unbounded stream.

    Example:
        >>> from stepstream import set_warn_unbounded
        >>> set_warn_unbounded(False)
    """
    _global_config.warn_unbounded = enabled


def get_warn_unbounded() -> bool:
    """Return whether unbounded-stream warnings are enabled."""
    return _global_config.warn_unbounded


def set_channel_capacity(capacity: int) -> None:
    """
    Set the default capacity used by ``Channel()``.

    Args:
        capacity: Maximum buffered values, or 0 for unbounded

    Raises:
        ValueError: If capacity < 0
    """
    _global_config.channel_capacity = capacity


def get_channel_capacity() -> int:
    """Return the default channel capacity."""
    return _global_config.channel_capacity
