"""
Basic usage examples for StepStream.

This demonstrates the core functionality of the lazy stream library.
"""

import threading

from stepstream import (
    Channel,
    Control,
    collect,
    elements,
    enumerated,
    fill,
    filtered,
    for_each_control,
    from_range,
    infinite,
    iota,
    mapped,
    pipe,
    receive,
    reduce,
    take,
    zipped,
)


def example_map_reduce():
    """Example: Map and reduce operations."""
    print("=== Map and Reduce Example ===")

    # Sum of squares from 0 to 999,999
    squares = mapped(from_range(0, 1_000_000), lambda x: x * x)
    result = reduce(squares, 0, lambda acc, x: acc + x)
    print(f"Sum of squares 0-999,999: {result}")

    product = reduce(from_range(1, 11), 1, lambda a, b: a * b)
    print(f"Product of 1-10: {product}")


def example_filter():
    """Example: Filtering elements."""
    print("\n=== Filter Example ===")

    evens = filtered(from_range(0, 20), lambda x: x % 2 == 0)
    print(f"Even numbers below 20: {collect(evens)}")


def example_unbounded():
    """Example: Bounding infinite streams."""
    print("\n=== Unbounded Streams Example ===")

    print(f"First five naturals: {take(iota(), 5)}")

    state = {"a": 0, "b": 1}

    def next_fibonacci():
        value = state["a"]
        state["a"], state["b"] = state["b"], state["a"] + state["b"]
        return value

    print(f"First ten Fibonacci numbers: {take(infinite(next_fibonacci), 10)}")

    labelled = collect(zipped(elements(["x", "y", "z"]), iota(100)))
    print(f"Zipped with a counter: {labelled}")


def example_control():
    """Example: Early termination and filling buffers."""
    print("\n=== Control Example ===")

    def stop_at_three(value):
        print(f"  visiting {value}")
        return Control.BREAK if value == 3 else Control.CONTINUE

    for_each_control(elements([1, 2, 3, 4]), stop_at_three)

    buffer = [None] * 5
    written = fill(buffer, elements("abc"))
    print(f"Filled {written} slots: {buffer}")

    print(f"Enumerated: {collect(enumerated(['x', 'y', 'z']))}")


def example_channel():
    """Example: Consuming values produced by another thread."""
    print("\n=== Channel Example ===")

    channel = Channel(capacity=4)

    def produce():
        with channel:
            for value in range(10):
                channel.send(value)

    producer = threading.Thread(target=produce)
    producer.start()
    doubled = collect(mapped(receive(channel), lambda x: x * 2))
    producer.join()
    print(f"Received and doubled: {doubled}")


def example_pipeline():
    """Example: Chaining operations fluently."""
    print("\n=== Pipeline Example ===")

    result = (
        pipe(range(1, 1001))
        .map(lambda x: x * 2)
        .filter(lambda x: x % 3 == 0)
        .map(lambda x: x + 1)
        .count()
    )
    print(f"Count after transformations: {result}")

    for value in pipe(iota()).filter(lambda x: x % 7 == 0).limit(3):
        print(f"  multiple of seven: {value}")


if __name__ == "__main__":
    example_map_reduce()
    example_filter()
    example_unbounded()
    example_control()
    example_channel()
    example_pipeline()
