"""
Tests for Pipeline, into_stream and iterate.
"""

import threading

import pytest

from stepstream import (
    DONE,
    Channel,
    Control,
    More,
    Pipeline,
    collect,
    from_range,
    into_stream,
    iota,
    is_unbounded,
    iterate,
    pipe,
)


class TestIntoStream:
    """Tests for converting Python objects into streams."""

    def test_range(self):
        """Test ranges keep their step."""
        assert collect(into_stream(range(0, 10, 4))) == [0, 4, 8]

    def test_sequences(self):
        """Test lists, tuples and strings."""
        assert collect(into_stream([1, 2])) == [1, 2]
        assert collect(into_stream((3, 4))) == [3, 4]
        assert collect(into_stream("hi")) == ["h", "i"]

    def test_iterable(self):
        """Test generators and sets are consumed via iter()."""
        assert collect(into_stream(x * x for x in range(3))) == [0, 1, 4]
        assert sorted(collect(into_stream({3, 1, 2}))) == [1, 2, 3]

    def test_existing_stream(self):
        """Test an existing stream is passed through."""
        stream = from_range(0, 3)
        assert into_stream(stream) is stream

    def test_channel(self):
        """Test channels are received from."""
        channel = Channel()
        channel.send("x")
        channel.close()
        assert collect(into_stream(channel)) == ["x"]

    def test_unsupported(self):
        """Test unsupported objects raise TypeError."""
        with pytest.raises(TypeError, match="into a stream"):
            into_stream(42)

    def test_class_is_not_a_stream(self):
        """Test classes are rejected instead of being treated as streams."""
        with pytest.raises(TypeError, match="into a stream"):
            into_stream(list)
        with pytest.raises(TypeError, match="into a stream"):
            pipe(Channel)


class TestIterate:
    """Tests for bridging streams to Python iterators."""

    def test_for_loop(self):
        """Test a stream can drive a for loop."""
        assert list(iterate(from_range(0, 4))) == [0, 1, 2, 3]

    def test_break_leaves_remainder(self):
        """Test breaking out of a loop leaves later elements in the stream."""
        stream = from_range(0, 10)
        for value in iterate(stream):
            if value == 2:
                break
        assert stream() == More(3)

    def test_lazy(self):
        """Test nothing is advanced until the generator is."""
        calls = []

        def stream():
            calls.append(1)
            return DONE

        generator = iterate(stream)
        assert calls == []
        assert list(generator) == []
        assert calls == [1]


class TestPipeline:
    """Tests for the chainable Pipeline wrapper."""

    def test_map_filter_collect(self):
        """Test a fluent map/filter chain."""
        result = (
            pipe(range(10))
            .filter(lambda x: x % 2)
            .map(lambda x: x * x)
            .collect()
        )
        assert result == [1, 9, 25, 49, 81]

    def test_pipeline_is_a_stream(self):
        """Test a pipeline can be advanced and passed to functions."""
        pipeline = pipe([7, 8])
        assert pipeline() == More(7)
        assert collect(pipeline) == [8]
        assert pipe(pipeline) is pipeline

    def test_iteration(self):
        """Test a pipeline is iterable."""
        assert [x for x in pipe(range(3)).map(str)] == ["0", "1", "2"]

    def test_zip_and_enumerate(self):
        """Test zip and enumerate."""
        assert pipe("ab").zip(iota(5)).collect() == [("a", 5), ("b", 6)]
        assert pipe("xyz").enumerate().collect() == [
            (0, "x"),
            (1, "y"),
            (2, "z"),
        ]
        assert pipe("xy").enumerate(start=1).collect() == [(1, "x"), (2, "y")]

    def test_chain(self):
        """Test chaining further streams."""
        result = pipe([1, 2]).chain(into_stream((3,)), from_range(4, 6)).collect()
        assert result == [1, 2, 3, 4, 5]

    def test_limit_and_take(self):
        """Test lazy and eager bounding of an unbounded pipeline."""
        naturals = pipe(iota())
        assert is_unbounded(naturals)
        assert not is_unbounded(naturals.limit(3))
        assert pipe(iota()).limit(3).collect() == [0, 1, 2]
        assert pipe(iota()).take(4) == [0, 1, 2, 3]

    def test_terminal_operations(self):
        """Test reduce, count, fill, for_each and for_each_control."""
        assert pipe(range(1, 5)).reduce(0, lambda acc, x: acc + x) == 10
        assert pipe(range(7)).count() == 7

        destination = [0, 0, 0]
        assert pipe([9]).fill(destination) == 1
        assert destination == [9, 0, 0]

        seen = []
        pipe(range(3)).for_each(seen.append)
        assert seen == [0, 1, 2]

        seen.clear()
        pipe(range(10)).for_each_control(
            lambda x: Control.BREAK if seen.append(x) or x == 2 else None
        )
        assert seen == [0, 1, 2]

    def test_fuse(self):
        """Test fuse stops calling the wrapped stream after DONE."""
        calls = []

        def flaky():
            calls.append(1)
            return DONE if len(calls) % 2 else More(len(calls))

        fused = Pipeline(flaky).fuse()
        assert fused() is DONE
        assert fused() is DONE
        assert len(calls) == 1

    def test_receive_pipeline(self):
        """Test a pipeline fed by a producer thread."""
        channel = Channel()

        def produce():
            with channel:
                for value in range(20):
                    channel.send(value)

        producer = threading.Thread(target=produce)
        producer.start()
        total = pipe(channel).filter(lambda x: x % 2 == 0).reduce(
            0, lambda acc, x: acc + x
        )
        producer.join(timeout=5)

        assert total == sum(range(0, 20, 2))
