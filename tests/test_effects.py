import asyncio
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from localchan import CallableSink, RootSink, create, localize, send


class AsyncQueueSink:
    """Host sink whose effect is an un-awaited enqueue coroutine."""

    def __init__(self):
        self.queue = asyncio.Queue()
        self.effects = []

    def send(self, value):
        effect = self.queue.put(value)
        self.effects.append(effect)
        return effect


def test_effect_is_returned_unchanged(sink):
    ch = localize(str.lower, create(lambda s: ("root", s), sink))

    assert send(ch, "A") == ("effect", 1)
    assert send(ch, "B") == ("effect", 2)


@pytest.mark.asyncio
async def test_awaitable_effect_passes_through():
    host = AsyncQueueSink()
    ch = localize(len, create(lambda n: {"count": n}, host))

    effect = send(ch, "abcd")

    assert effect is host.effects[0]
    assert asyncio.iscoroutine(effect)
    assert host.queue.empty()

    await effect
    assert host.queue.get_nowait() == {"count": 4}


def test_callable_sink_adapter():
    seen = []
    host = CallableSink(lambda v: seen.append(v) or "queued")
    ch = create(lambda x: x * 10, host)

    assert isinstance(host, RootSink)
    assert send(ch, 3) == "queued"
    assert seen == [30]


def test_callable_sink_rejects_non_callable():
    with pytest.raises(TypeError):
        CallableSink("not a function")


def test_concurrent_sends_from_sibling_channels(sink):
    root = create(lambda ev: ev, sink)
    siblings = [localize(lambda v, name=name: (name, v), root, label=name) for name in "abcd"]

    def emit(i):
        return send(siblings[i % 4], i)

    with ThreadPoolExecutor(max_workers=8) as pool:
        effects = list(pool.map(emit, range(400)))

    assert len(effects) == 400
    assert len(sink.received) == 400
    counts = Counter(name for name, _ in sink.received)
    assert counts == {"a": 100, "b": 100, "c": 100, "d": 100}
    assert all(i % 4 == "abcd".index(name) for name, i in sink.received)
