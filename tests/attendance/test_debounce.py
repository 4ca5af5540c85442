from __future__ import annotations

import pytest

from library_seating.attendance.debounce import ScanDebouncer
from library_seating.core.exceptions import ScanIgnored


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_second_scan_within_cooldown_is_ignored():
    clock = FakeClock()
    debouncer = ScanDebouncer(2.0, clock=clock)

    with debouncer.hold("scanner"):
        pass

    clock.now += 1.5
    with pytest.raises(ScanIgnored):
        with debouncer.hold("scanner"):
            pass

    clock.now += 0.5
    with debouncer.hold("scanner"):
        pass


def test_channel_is_busy_while_scan_is_processed():
    clock = FakeClock()
    debouncer = ScanDebouncer(0.0, clock=clock)

    with debouncer.hold("scanner"):
        assert debouncer.is_busy("scanner")
        with pytest.raises(ScanIgnored):
            with debouncer.hold("scanner"):
                pass

    assert not debouncer.is_busy("scanner")


def test_channels_do_not_block_each_other():
    clock = FakeClock()
    debouncer = ScanDebouncer(2.0, clock=clock)

    with debouncer.hold("scanner"):
        with debouncer.hold("manual"):
            assert debouncer.is_busy("manual")


def test_cooldown_applies_after_failed_toggle():
    clock = FakeClock()
    debouncer = ScanDebouncer(2.0, clock=clock)

    with pytest.raises(RuntimeError):
        with debouncer.hold("scanner"):
            raise RuntimeError("toggle failed")

    assert debouncer.is_busy("scanner")
    clock.now += 2.0
    assert not debouncer.is_busy("scanner")
