import asyncio


class StaticPageProvider:
    """Page provider with a settable selection and readiness flag."""

    def __init__(self, page_id: str | None = None, ready: bool = True) -> None:
        self.page_id = page_id
        self.ready = ready
        self.readiness_checks = 0

    def get_active_page_id(self) -> str | None:
        return self.page_id

    def is_ready(self) -> bool:
        self.readiness_checks += 1
        return self.ready

    def select(self, page_id: str | None) -> None:
        self.page_id = page_id

    def mark_ready(self) -> None:
        self.ready = True


class SignalingPageProvider(StaticPageProvider):
    """Page provider that also announces readiness through an event."""

    def __init__(self, page_id: str | None = None, ready: bool = False) -> None:
        super().__init__(page_id, ready)
        self._ready_event = asyncio.Event()
        if ready:
            self._ready_event.set()

    def mark_ready(self) -> None:
        super().mark_ready()
        self._ready_event.set()

    async def wait_ready(self) -> None:
        await self._ready_event.wait()
