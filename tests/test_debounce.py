from __future__ import annotations

from tilewalk.systems.debounce import DebounceGate


def test_fires_at_most_once_per_interval() -> None:
    interval = 200.0
    gate = DebounceGate(interval)
    stamps = [0.0, interval / 2, interval + 1, interval * 1.5]
    assert [gate.try_fire(t) for t in stamps] == [True, False, True, False]


def test_first_call_always_fires() -> None:
    gate = DebounceGate(200.0)
    assert gate.try_fire(5.0)
    assert gate.last_fire == 5.0


def test_exactly_interval_does_not_fire() -> None:
    gate = DebounceGate(100.0)
    assert gate.try_fire(1000.0)
    assert not gate.try_fire(1100.0)
    assert gate.try_fire(1100.5)
    assert gate.last_fire == 1100.5
