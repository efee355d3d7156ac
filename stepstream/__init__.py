"""
StepStream - Lazy, pull-based streams built from step functions

A stream is any zero-argument callable returning ``More(value)`` or
``DONE``. Sources, transformations and consumers are all small functions
over that one protocol, so no per-adapter classes are needed.
"""

from .adapters import Pipeline, into_stream, pipe
from .bridge import iterate
from .channel import Channel, ChannelClosed
from .config import (
    StreamConfig,
    get_channel_capacity,
    get_warn_unbounded,
    set_channel_capacity,
    set_warn_unbounded,
)
from .consumers import (
    collect,
    count,
    fill,
    for_each,
    for_each_control,
    reduce,
    take,
)
from .core import chained, filtered, fused, limited, mapped, zipped
from .producers import (
    elements,
    enumerated,
    from_iterable,
    from_range,
    indices,
    infinite,
    iota,
    receive,
)
from .protocols import DONE, Done, More, Step, Stream, is_unbounded, more
from .records import Control, Indexed, Pair

__version__ = "0.1.0"

__all__ = [
    # Protocol
    "Stream",
    "Step",
    "More",
    "Done",
    "DONE",
    "more",
    "is_unbounded",
    # Records
    "Pair",
    "Indexed",
    "Control",
    # Sources
    "from_range",
    "indices",
    "elements",
    "enumerated",
    "receive",
    "iota",
    "infinite",
    "from_iterable",
    # Transformations
    "mapped",
    "filtered",
    "zipped",
    "chained",
    "fused",
    "limited",
    # Consumers
    "for_each",
    "for_each_control",
    "reduce",
    "collect",
    "count",
    "take",
    "fill",
    # Adapters
    "Pipeline",
    "into_stream",
    "pipe",
    "iterate",
    "Channel",
    "ChannelClosed",
    # Configuration
    "StreamConfig",
    "set_warn_unbounded",
    "get_warn_unbounded",
    "set_channel_capacity",
    "get_channel_capacity",
]
