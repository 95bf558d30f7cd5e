"""
ManualTimers - virtual clock for deterministic runs.

Implements both TimerPort and FramePort without touching wall-clock time:
- call_later() timers fire only when advance() moves virtual time past them
- sleep() advances virtual time by the requested amount, then yields once
- request_frame() callbacks run only on flush_frames()
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class ManualTimerHandle:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualTimers:
    now: float = 0.0
    sleeps: list[float] = field(default_factory=list)
    _timers: list[ManualTimerHandle] = field(default_factory=list)
    _frames: list[ManualTimerHandle] = field(default_factory=list)

    # --- TimerPort ---

    def call_later(self, seconds: float, callback: Callable[[], None]) -> ManualTimerHandle:
        handle = ManualTimerHandle(due=self.now + seconds, callback=callback)
        self._timers.append(handle)
        return handle

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)
        await asyncio.sleep(0)

    # --- FramePort ---

    def request_frame(self, callback: Callable[[], None]) -> ManualTimerHandle:
        handle = ManualTimerHandle(due=self.now, callback=callback)
        self._frames.append(handle)
        return handle

    def cancel_frame(self, handle: ManualTimerHandle) -> None:
        handle.cancel()

    # --- Driving ---

    def advance(self, seconds: float) -> None:
        """Move virtual time forward, firing due timers in due order."""
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and not t.fired and t.due <= target]
            if not due:
                break
            nxt = min(due, key=lambda t: t.due)
            self.now = max(self.now, nxt.due)
            nxt.fired = True
            nxt.callback()
        self.now = target
        self._timers = [t for t in self._timers if not t.cancelled and not t.fired]

    def flush_frames(self) -> int:
        """Run every pending frame callback; returns how many ran."""
        frames, self._frames = self._frames, []
        ran = 0
        for frame in frames:
            if frame.cancelled:
                continue
            frame.fired = True
            frame.callback()
            ran += 1
        return ran

    @property
    def pending_timers(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled and not t.fired)

    @property
    def pending_frames(self) -> int:
        return sum(1 for f in self._frames if not f.cancelled)
