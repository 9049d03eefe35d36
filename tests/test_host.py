"""Tests for the host-side helpers that do not need a window."""

from chip8vm.host import KEY_LAYOUT, FixedRateClock


def test_key_layout_covers_keypad():
    assert sorted(KEY_LAYOUT.values()) == list(range(16))


def test_clock_waits_for_first_period():
    clock = FixedRateClock(period=0.01, start=0.0)
    assert clock.poll(0.005) == 0
    assert clock.poll(0.010) == 1
    assert clock.poll(0.015) == 0


def test_clock_catches_up():
    clock = FixedRateClock(period=0.01, start=0.0)
    assert clock.poll(0.0451) == 4
    assert clock.poll(0.0501) == 1


def test_clock_caps_burst():
    clock = FixedRateClock(period=0.001, start=0.0, max_ticks=8)
    assert clock.poll(1.0005) == 8
    # The backlog is dropped, not replayed.
    assert clock.poll(1.0005) == 0
