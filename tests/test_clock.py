import time

import pytest

from astrochron.clock import ElapsedClock


def _fake_time_source(*readings):
    values = iter(readings)
    return lambda: next(values)


class TestElapsedClock:
    def test_started_at(self):
        clock = ElapsedClock(_fake_time_source(100.0))
        assert clock.started_at == 100.0

    def test_seconds_since_start(self):
        clock = ElapsedClock(_fake_time_source(100.0, 101.5, 160.0))
        assert clock.seconds_since_start() == pytest.approx(1.5)
        assert clock.seconds_since_start() == pytest.approx(60.0)

    def test_reference_instant_is_fixed(self):
        clock = ElapsedClock(_fake_time_source(5.0, 6.0, 7.0))
        clock.seconds_since_start()
        assert clock.started_at == 5.0

    def test_default_source_is_monotonic(self):
        clock = ElapsedClock()
        assert clock.seconds_since_start() >= 0.0
        assert clock.started_at <= time.monotonic()

    def test_repr(self):
        clock = ElapsedClock(_fake_time_source(2.0))
        assert repr(clock) == "ElapsedClock(started_at=2.0)"
