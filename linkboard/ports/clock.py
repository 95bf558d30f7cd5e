from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class TimerPort(Protocol):
    def call_later(self, seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after the delay; cancellable through the handle."""
        ...

    async def sleep(self, seconds: float) -> None:
        ...


class FramePort(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> TimerHandle:
        """Run callback at the next frame boundary."""
        ...

    def cancel_frame(self, handle: TimerHandle) -> None:
        ...
