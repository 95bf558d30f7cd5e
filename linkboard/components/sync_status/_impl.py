"""
SyncStatusNotifier - status banner state machine.

States: Hidden, Visible-Pending-Hide. Transitions are driven only by
notify() calls and timer expiry.

Key behaviors:
- Every notify() cancels the pending auto-hide and remove timers first
- Shown messages auto-hide after the error or regular visible duration
- Hiding is two-phase: opacity to 0, then removed from layout after the fade
"""

from __future__ import annotations

from linkboard.ports.clock import TimerHandle, TimerPort
from linkboard.ports.ui import BannerViewPort
from linkboard.rules.models import TimingRules


class SyncStatusNotifier:
    def __init__(
        self,
        view: BannerViewPort,
        timers: TimerPort,
        timing: TimingRules | None = None,
        default_message: str = "",
    ) -> None:
        self._view = view
        self._timers = timers
        self._timing = timing or TimingRules()
        self._default_message = default_message
        self._hide_timer: TimerHandle | None = None
        self._remove_timer: TimerHandle | None = None

    @property
    def hide_pending(self) -> bool:
        return self._hide_timer is not None

    def notify(
        self,
        show: bool,
        message: str | None = None,
        is_error: bool = False,
        persistent: bool = False,
    ) -> None:
        """
        Show or hide the banner.

        A persistent message stays until the next notify() call.
        """
        self._cancel_timers()

        if not show:
            self._view.set_message(message or self._default_message, is_error)
            self._fade_out()
            return

        self._view.show(message or self._default_message, is_error)
        if persistent:
            return

        visible_ms = (
            self._timing.status_error_visible_ms if is_error else self._timing.status_visible_ms
        )
        self._hide_timer = self._timers.call_later(visible_ms / 1000, self._on_hide_timer)

    def _cancel_timers(self) -> None:
        for timer in (self._hide_timer, self._remove_timer):
            if timer is not None:
                timer.cancel()
        self._hide_timer = None
        self._remove_timer = None

    def _on_hide_timer(self) -> None:
        self._hide_timer = None
        self._fade_out()

    def _fade_out(self) -> None:
        self._view.set_opacity(0.0)
        self._remove_timer = self._timers.call_later(
            self._timing.status_fade_ms / 1000, self._on_remove_timer
        )

    def _on_remove_timer(self) -> None:
        self._remove_timer = None
        self._view.set_displayed(False)
