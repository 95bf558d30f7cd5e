"""
In-memory remote link stores.

InMemoryLinkStore is immediately consistent: a read issued after a write
resolves sees that write. CachedLinkStore serves reads from a snapshot that
only catches up with writes on wait_until_visible(), like a read cache with
debounced invalidation.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from uuid import uuid4

from linkboard.domain.entities import Link

logger = logging.getLogger(__name__)


class InMemoryLinkStore:
    def __init__(self, links: Iterable[Link] = (), latency: float = 0.0) -> None:
        self._links: dict[str, Link] = {link.id: link for link in links}
        self.latency = latency
        # Mutations touching these ids report failure
        self.fail_ids: set[str] = set()
        self.fail_creates = False
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    async def _io(self, op: str, *args: object) -> None:
        self.calls.append((op, args))
        # Always yield so concurrent callers interleave like real remote I/O
        await asyncio.sleep(self.latency)

    def _read(self) -> dict[str, Link]:
        return self._links

    def seed(self, links: Iterable[Link]) -> None:
        for link in links:
            self._links[link.id] = link

    def get(self, link_id: str) -> Link | None:
        return self._links.get(link_id)

    def calls_to(self, op: str) -> list[tuple[object, ...]]:
        return [args for name, args in self.calls if name == op]

    async def fetch_links_for_page(self, page_id: str) -> list[Link]:
        await self._io("fetch_links_for_page", page_id)
        links = [link for link in self._read().values() if link.page_id == page_id]
        return sorted(links, key=lambda link: link.order_index)

    async def create_link(self, name: str, url: str, order_index: int, page_id: str) -> bool:
        await self._io("create_link", name, url, order_index, page_id)
        if self.fail_creates:
            logger.error(f"Create rejected for {name!r}")
            return False
        link = Link(id=str(uuid4()), name=name, url=url, order_index=order_index, page_id=page_id)
        self._links[link.id] = link
        return True

    async def delete_link(self, link_id: str) -> bool:
        await self._io("delete_link", link_id)
        if link_id in self.fail_ids or link_id not in self._links:
            return False
        del self._links[link_id]
        return True

    async def update_link(self, link_id: str, name: str, url: str) -> bool:
        await self._io("update_link", link_id, name, url)
        link = self._links.get(link_id)
        if link is None or link_id in self.fail_ids:
            return False
        self._links[link_id] = link.model_copy(update={"name": name, "url": url})
        return True

    async def swap_order(self, id_a: str, order_a: int, id_b: str, order_b: int) -> bool:
        await self._io("swap_order", id_a, order_a, id_b, order_b)
        a = self._links.get(id_a)
        b = self._links.get(id_b)
        if a is None or b is None or {id_a, id_b} & self.fail_ids:
            return False
        self._links[id_a] = a.model_copy(update={"order_index": order_b})
        self._links[id_b] = b.model_copy(update={"order_index": order_a})
        return True

    async def move_link_to_page(self, link_id: str, page_id: str) -> bool:
        await self._io("move_link_to_page", link_id, page_id)
        link = self._links.get(link_id)
        if link is None or link_id in self.fail_ids:
            return False
        # Lands after the target page's last link
        order_index = max(
            (other.order_index for other in self._links.values() if other.page_id == page_id),
            default=-1,
        ) + 1
        self._links[link_id] = link.model_copy(
            update={"page_id": page_id, "order_index": order_index}
        )
        return True


class CachedLinkStore(InMemoryLinkStore):
    """Store whose reads lag behind writes until the cache is invalidated."""

    def __init__(self, links: Iterable[Link] = (), latency: float = 0.0) -> None:
        super().__init__(links, latency)
        self._cache: dict[str, Link] = dict(self._links)

    def _read(self) -> dict[str, Link]:
        return self._cache

    def seed(self, links: Iterable[Link]) -> None:
        super().seed(links)
        self._cache = dict(self._links)

    async def wait_until_visible(self) -> None:
        await self._io("wait_until_visible")
        self._cache = dict(self._links)
