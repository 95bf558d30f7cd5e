from typing import Protocol, runtime_checkable


class PageProviderPort(Protocol):
    """Source of the currently selected page."""

    def get_active_page_id(self) -> str | None:
        ...

    def is_ready(self) -> bool:
        ...


@runtime_checkable
class ReadinessSignalPort(Protocol):
    """Optional provider capability: an awaitable initialization event."""

    async def wait_ready(self) -> None:
        ...
