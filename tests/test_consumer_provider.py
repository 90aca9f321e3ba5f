import itertools

import pytest

from funckit import Consumer, Provider, Function


def test_consumer_then():
    total = []
    text = []
    add_to_sum = Consumer(total.append)
    append_to_string = Consumer(lambda x: text.append(str(x)))

    both = add_to_sum.then(append_to_string)
    assert both.call(5) is None
    both.accept(3)
    both(2)

    assert sum(total) == 10
    assert "".join(text) == "532"


def test_consumer_then_accepts_plain_function():
    seen = []
    consumer = Consumer(lambda x: seen.append(("first", x))).then(lambda x: seen.append(("second", x)))
    consumer.accept(1)
    assert seen == [("first", 1), ("second", 1)]


def test_consumer_failure_stops_sequence():
    seen = []

    def fail(_):
        raise RuntimeError("stop")

    consumer = Consumer(fail).then(seen.append)
    with pytest.raises(RuntimeError):
        consumer.accept(1)
    assert seen == []


def test_provider_make():
    five = Provider(lambda: 5)
    assert five.make() == 5
    assert five.make() == 5
    assert five() == 5
    assert five.call(None) == 5


def test_provider_does_not_cache():
    counter = itertools.count()
    provider = Provider(lambda: next(counter))
    assert [provider.make() for _ in range(3)] == [0, 1, 2]


def test_provider_composes_like_a_function():
    lengths = Provider(lambda: "abc")
    assert Function(lengths).piped(len).call(None) == 3


def test_provider_rejects_non_callable():
    with pytest.raises(TypeError):
        Provider("not callable")


def test_consumer_then_rejects_non_callable():
    with pytest.raises(TypeError):
        Consumer(print).then(42)
