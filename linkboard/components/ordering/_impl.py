"""
OrderReconciler - paired order_index swap between adjacent links.

Key behaviors:
- Neighbors are resolved in order_index order from the current snapshot
- A move past either end is a no-op reported as "boundary"; no remote call
- The swap is one remote call covering both links
- A successful swap settles, then reloads; a failed one does neither
"""

from __future__ import annotations

import logging

from linkboard.components.page_loader import PageLoadCoordinator
from linkboard.domain.entities import Direction, ReorderResult
from linkboard.ports.store import RemoteLinkStorePort

logger = logging.getLogger(__name__)


class OrderReconciler:
    def __init__(self, store: RemoteLinkStorePort, coordinator: PageLoadCoordinator) -> None:
        self._store = store
        self._coordinator = coordinator

    async def move_adjacent(self, link_id: str, direction: Direction) -> ReorderResult:
        snapshot = self._coordinator.snapshot
        link = snapshot.get(link_id)
        if link is None:
            logger.warning(f"Cannot move {link_id}: not in the current snapshot")
            return "not_found"

        neighbor = snapshot.neighbor(link_id, direction)
        if neighbor is None:
            return "boundary"

        success = await self._store.swap_order(
            link.id, link.order_index, neighbor.id, neighbor.order_index
        )
        if not success:
            logger.error(f"Swap of {link.id} and {neighbor.id} failed")
            return "failed"

        logger.info(f"Moved {link.id} {direction} past {neighbor.id}")
        await self._coordinator.settle_and_reload()
        return "swapped"
