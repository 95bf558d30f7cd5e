"""
PageLoadCoordinator - ties the snapshot, renderer and status banner together.

Key behaviors:
- No active page renders an explicit "no page selected" state, no fetch
- A load shows a transient loading status, fetches, replaces the snapshot,
  schedules a render and clears the status
- Readiness: awaits the provider's signal when it has one, otherwise polls
  is_ready() on a fixed interval; both are bounded by
  poll_interval_ms * max_attempts and report a timeout exactly once
- Settling: awaits the store's visibility acknowledgement when it has one,
  otherwise sleeps the configured settle delay
"""

from __future__ import annotations

import asyncio
import logging

from linkboard.components.link_store import LinkStore
from linkboard.components.render import RenderScheduler
from linkboard.components.sync_status import SyncStatusNotifier
from linkboard.ports.clock import TimerPort
from linkboard.ports.page import PageProviderPort, ReadinessSignalPort
from linkboard.ports.store import RemoteLinkStorePort, VisibilityAckPort
from linkboard.rules.models import Rules

logger = logging.getLogger(__name__)


class PageLoadCoordinator:
    def __init__(
        self,
        store: RemoteLinkStorePort,
        pages: PageProviderPort,
        snapshot: LinkStore,
        renderer: RenderScheduler,
        notifier: SyncStatusNotifier,
        timers: TimerPort,
        rules: Rules | None = None,
    ) -> None:
        self._store = store
        self._pages = pages
        self._snapshot = snapshot
        self._renderer = renderer
        self._notifier = notifier
        self._timers = timers
        self._rules = rules or Rules()

    @property
    def snapshot(self) -> LinkStore:
        return self._snapshot

    def active_page_id(self) -> str | None:
        return self._pages.get_active_page_id()

    async def load_active_page(self) -> bool:
        """Reload the snapshot from the store. Returns False when no page is active."""
        page_id = self._pages.get_active_page_id()
        if not page_id:
            logger.warning("No active page, nothing to load")
            self._renderer.render_no_page()
            return False

        self._notifier.notify(True, self._rules.messages.loading)
        links = await self._store.fetch_links_for_page(page_id)
        self._snapshot.replace(links)
        self._renderer.schedule(self._snapshot.all())
        self._notifier.notify(False)

        logger.info(f"Loaded {len(links)} links for page {page_id}")
        return True

    async def settle(self) -> None:
        """Wait until a completed mutation should be visible to reads."""
        if isinstance(self._store, VisibilityAckPort):
            await self._store.wait_until_visible()
            return
        # Assumes the store's read path converges within this window
        await self._timers.sleep(self._rules.timing.settle_delay_ms / 1000)

    async def settle_and_reload(self) -> bool:
        await self.settle()
        return await self.load_active_page()

    async def wait_for_readiness(self) -> bool:
        """
        Wait for the page provider, then load the active page.

        On timeout a persistent error status is shown and no further
        attempts are made. Returns whether the provider became ready.
        """
        if isinstance(self._pages, ReadinessSignalPort):
            ready = await self._await_signal(self._pages)
        else:
            ready = await self._poll_readiness()

        if not ready:
            logger.error("Timeout: page provider did not become ready")
            self._notifier.notify(
                True, self._rules.messages.readiness_timeout, is_error=True, persistent=True
            )
            return False

        logger.info("Page provider ready, loading links")
        await self.load_active_page()
        return True

    async def _poll_readiness(self) -> bool:
        readiness = self._rules.readiness
        for _ in range(readiness.max_attempts):
            await self._timers.sleep(readiness.poll_interval_ms / 1000)
            if self._pages.is_ready():
                return True
        return False

    async def _await_signal(self, pages: ReadinessSignalPort) -> bool:
        if self._pages.is_ready():
            return True

        readiness = self._rules.readiness
        bound = readiness.poll_interval_ms * readiness.max_attempts / 1000
        signal = asyncio.ensure_future(pages.wait_ready())
        deadline = asyncio.ensure_future(self._timers.sleep(bound))
        try:
            await asyncio.wait({signal, deadline}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (signal, deadline):
                if not task.done():
                    task.cancel()
        return signal.done() and not signal.cancelled() and signal.exception() is None
