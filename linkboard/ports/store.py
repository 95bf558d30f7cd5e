from typing import Protocol, runtime_checkable

from linkboard.domain.entities import Link


class RemoteLinkStorePort(Protocol):
    """Remote document store holding every page's links."""

    async def fetch_links_for_page(self, page_id: str) -> list[Link]:
        """Return all links owned by the page, in any order."""
        ...

    async def create_link(self, name: str, url: str, order_index: int, page_id: str) -> bool:
        ...

    async def delete_link(self, link_id: str) -> bool:
        ...

    async def update_link(self, link_id: str, name: str, url: str) -> bool:
        ...

    async def swap_order(self, id_a: str, order_a: int, id_b: str, order_b: int) -> bool:
        """Give id_a the order order_b and id_b the order order_a as one unit."""
        ...

    async def move_link_to_page(self, link_id: str, page_id: str) -> bool:
        ...


@runtime_checkable
class VisibilityAckPort(Protocol):
    """Optional store capability: resolves once earlier writes are readable."""

    async def wait_until_visible(self) -> None:
        ...
