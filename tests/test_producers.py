"""
Tests for stream sources.
"""

import itertools
import threading

import pytest

from stepstream import (
    DONE,
    Channel,
    Indexed,
    More,
    collect,
    elements,
    enumerated,
    from_iterable,
    from_range,
    indices,
    infinite,
    iota,
    is_unbounded,
    receive,
    take,
)


class TestFromRange:
    """Tests for the range source."""

    def test_ascending(self):
        """Test a simple ascending range."""
        assert collect(from_range(0, 5)) == [0, 1, 2, 3, 4]

    def test_length(self):
        """Test the length is b - a for a <= b."""
        for a, b in [(0, 0), (3, 10), (-5, 5), (7, 8)]:
            result = collect(from_range(a, b))
            assert result == list(range(a, b))
            assert len(result) == b - a

    def test_empty_when_start_not_below_stop(self):
        """Test a >= b gives an empty stream."""
        assert collect(from_range(5, 5)) == []
        assert collect(from_range(10, 3)) == []

    def test_step(self):
        """Test positive and negative steps."""
        assert collect(from_range(0, 10, 3)) == [0, 3, 6, 9]
        assert collect(from_range(5, 0, -2)) == [5, 3, 1]
        assert collect(from_range(0, 5, -1)) == []

    def test_zero_step(self):
        """Test a zero step is rejected."""
        with pytest.raises(ValueError, match="step cannot be zero"):
            from_range(0, 10, 0)

    def test_large_numbers(self):
        """Test with large integers."""
        start = 10**20
        assert collect(from_range(start, start + 3)) == [
            start,
            start + 1,
            start + 2,
        ]

    def test_stays_done(self):
        """Test an exhausted range keeps returning DONE."""
        stream = from_range(0, 1)
        assert stream() == More(0)
        assert stream() is DONE
        assert stream() is DONE


class TestCollections:
    """Tests for elements, indices and enumerated."""

    def test_elements(self):
        """Test elements yields in index order."""
        data = ["hello", "world", "test"]
        assert collect(elements(data)) == data

    def test_elements_tuple_and_string(self):
        """Test elements over tuples and strings."""
        assert collect(elements((1, 2, 3))) == [1, 2, 3]
        assert collect(elements("abc")) == ["a", "b", "c"]

    def test_elements_empty(self):
        """Test elements over an empty list."""
        assert collect(elements([])) == []

    def test_elements_stays_done(self):
        """Test an exhausted elements stream keeps returning DONE."""
        stream = elements([1])
        collect(stream)
        assert stream() is DONE

    def test_indices(self):
        """Test indices of a collection."""
        assert collect(indices(["a", "b", "c"])) == [0, 1, 2]
        assert collect(indices([])) == []

    def test_enumerated(self):
        """Test enumerated yields index/value records."""
        result = collect(enumerated(["x", "y", "z"]))
        assert result == [(0, "x"), (1, "y"), (2, "z")]
        assert result[1] == Indexed(index=1, value="y")
        assert result[2].index == 2
        assert result[2].value == "z"


class TestUnbounded:
    """Tests for iota and infinite."""

    def test_iota(self):
        """Test iota counts up from zero."""
        assert take(iota(), 5) == [0, 1, 2, 3, 4]

    def test_iota_start(self):
        """Test iota with a start value."""
        assert take(iota(10), 3) == [10, 11, 12]

    def test_infinite(self):
        """Test infinite calls the generator on every advance."""
        counter = itertools.count(1)
        assert take(infinite(lambda: next(counter) * 10), 4) == [10, 20, 30, 40]

    def test_marked_unbounded(self):
        """Test unbounded sources are marked, finite ones are not."""
        assert is_unbounded(iota())
        assert is_unbounded(infinite(lambda: 0))
        assert not is_unbounded(from_range(0, 10))
        assert not is_unbounded(elements([1, 2]))


class TestFromIterable:
    """Tests for adapting Python iterables."""

    def test_generator(self):
        """Test a generator is consumed lazily."""
        produced = []

        def gen():
            for i in range(3):
                produced.append(i)
                yield i

        stream = from_iterable(gen())
        assert produced == []
        assert stream() == More(0)
        assert produced == [0]
        assert collect(stream) == [1, 2]

    def test_stays_done(self):
        """Test the iterator is not touched again after exhaustion."""
        stream = from_iterable(iter([1]))
        assert collect(stream) == [1]
        assert stream() is DONE


class TestReceive:
    """Tests for the channel-backed source."""

    def test_drains_closed_channel(self):
        """Test values buffered before close are still received."""
        channel = Channel()
        for value in (1, 2, 3):
            channel.send(value)
        channel.close()
        assert collect(receive(channel)) == [1, 2, 3]

    def test_producer_thread(self):
        """Test receiving from a concurrently running producer."""
        channel = Channel(capacity=2)

        def produce():
            with channel:
                for value in range(100):
                    channel.send(value)

        producer = threading.Thread(target=produce)
        producer.start()
        result = collect(receive(channel))
        producer.join(timeout=5)

        assert result == list(range(100))

    def test_blocks_until_value(self):
        """Test advancing blocks until a value arrives."""
        channel = Channel()
        stream = receive(channel)
        timer = threading.Timer(0.05, channel.send, args=("late",))
        timer.start()
        try:
            assert stream() == More("late")
        finally:
            timer.cancel()
            channel.close()

    def test_stays_done(self):
        """Test a closed and drained channel keeps returning DONE."""
        channel = Channel()
        channel.close()
        stream = receive(channel)
        assert stream() is DONE
        assert stream() is DONE
