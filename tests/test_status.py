"""Tests for transient status messages and their single pending timer."""

from __future__ import annotations

import unittest

from nixtui.state import SEVERITY_OK, SEVERITY_WARN, new_state
from nixtui.status import expire_status, seconds_until_status_clear, set_status


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class StatusTimerTests(unittest.TestCase):
    def test_new_message_cancels_the_previous_clear(self) -> None:
        clock = FakeClock()
        state = new_state(clock=clock, status_seconds=3.5)
        first = set_status(state, "first", SEVERITY_OK)
        clock.now = 2.0
        second = set_status(state, "second", SEVERITY_WARN)

        self.assertTrue(first.cancelled)
        self.assertIs(state.status_timer, second)
        self.assertEqual(state.status_severity, SEVERITY_WARN)

        # The first deadline (3.5) passes without clearing the newer message.
        self.assertFalse(expire_status(state, now=4.0))
        self.assertEqual(state.status_message, "second")

        self.assertTrue(expire_status(state, now=5.5))
        self.assertEqual(state.status_message, "")
        # Exactly one clear.
        self.assertFalse(expire_status(state, now=9.0))

    def test_cancelled_timer_never_clears(self) -> None:
        clock = FakeClock()
        state = new_state(clock=clock)
        timer = set_status(state, "hello")
        timer.cancel()
        self.assertFalse(expire_status(state, now=100.0))
        self.assertEqual(state.status_message, "hello")
        self.assertIsNone(seconds_until_status_clear(state, now=0.0))

    def test_expire_uses_state_clock_by_default(self) -> None:
        clock = FakeClock()
        state = new_state(clock=clock, status_seconds=1.0)
        set_status(state, "saved")
        self.assertFalse(expire_status(state))
        clock.now = 1.0
        self.assertTrue(expire_status(state))

    def test_seconds_until_clear(self) -> None:
        clock = FakeClock(10.0)
        state = new_state(clock=clock, status_seconds=3.5)
        self.assertIsNone(seconds_until_status_clear(state))
        set_status(state, "x")
        self.assertAlmostEqual(seconds_until_status_clear(state), 3.5)
        self.assertEqual(seconds_until_status_clear(state, now=20.0), 0.0)


if __name__ == "__main__":
    unittest.main()
