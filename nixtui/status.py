"""Transient status-bar messages with a single pending auto-clear timer."""

from __future__ import annotations

from .state import SEVERITY_INFO, AppState, StatusTimer


def set_status(state: AppState, message: str, severity: str = SEVERITY_INFO) -> StatusTimer:
    """Show ``message`` and schedule its clear, replacing any pending clear."""
    if state.status_timer is not None:
        state.status_timer.cancel()
        state.status_timer = None
    state.status_message = message
    state.status_severity = severity
    timer = StatusTimer(deadline=state.clock() + state.status_seconds)
    state.status_timer = timer
    return timer


def expire_status(state: AppState, now: float | None = None) -> bool:
    """Clear the message when its timer is due; return whether state changed."""
    timer = state.status_timer
    if timer is None:
        return False
    if now is None:
        now = state.clock()
    if not timer.due(now):
        return False
    state.status_message = ""
    state.status_timer = None
    return True


def seconds_until_status_clear(state: AppState, now: float | None = None) -> float | None:
    """Return seconds until the pending clear, or ``None`` when nothing is pending."""
    timer = state.status_timer
    if timer is None or timer.cancelled:
        return None
    if now is None:
        now = state.clock()
    return max(0.0, timer.deadline - now)


__all__ = ["expire_status", "seconds_until_status_clear", "set_status"]
