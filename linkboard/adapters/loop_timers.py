import asyncio
from collections.abc import Callable


class LoopTimers:
    """
    Timers and frame requests backed by the running asyncio loop.

    Frames are emulated with a fixed interval since there is no display
    refresh signal outside a browser.
    """

    def __init__(self, frame_interval: float = 0.016) -> None:
        self.frame_interval = frame_interval

    def call_later(self, seconds: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(seconds, callback)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    def request_frame(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(self.frame_interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
