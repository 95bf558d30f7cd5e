from __future__ import annotations

from dataclasses import dataclass

from linkboard.adapters.loop_timers import LoopTimers
from linkboard.adapters.memory_ui import (
    MemoryBanner,
    MemoryEditModal,
    MemoryLinkForm,
    MemoryLinkTable,
    PresetConfirm,
    RecordingBrowser,
    RecordingSearchIndex,
)
from linkboard.components.action_gate import ActionGate
from linkboard.components.actions import LinkActions
from linkboard.components.link_store import LinkStore
from linkboard.components.ordering import OrderReconciler
from linkboard.components.page_loader import PageLoadCoordinator
from linkboard.components.render import RenderScheduler
from linkboard.components.sync_status import SyncStatusNotifier
from linkboard.ports.clock import FramePort, TimerPort
from linkboard.ports.page import PageProviderPort
from linkboard.ports.store import RemoteLinkStorePort
from linkboard.ports.ui import (
    BannerViewPort,
    BrowserPort,
    ConfirmPort,
    EditModalPort,
    LinkFormPort,
    LinkTableViewPort,
    SearchIndexPort,
)
from linkboard.rules.models import Rules


@dataclass
class SyncEngine:
    """
    One page's synchronization state and the components that share it.

    Everything that would otherwise be module-level mutable state (snapshot,
    gate, pending render, banner timers) lives on this instance.
    """

    rules: Rules
    store: RemoteLinkStorePort
    pages: PageProviderPort
    snapshot: LinkStore
    gate: ActionGate
    renderer: RenderScheduler
    notifier: SyncStatusNotifier
    coordinator: PageLoadCoordinator
    reconciler: OrderReconciler
    actions: LinkActions
    table: LinkTableViewPort
    banner: BannerViewPort
    modal: EditModalPort
    form: LinkFormPort

    @classmethod
    def create(
        cls,
        store: RemoteLinkStorePort,
        pages: PageProviderPort,
        rules: Rules | None = None,
        *,
        timers: TimerPort | None = None,
        frames: FramePort | None = None,
        table: LinkTableViewPort | None = None,
        banner: BannerViewPort | None = None,
        search: SearchIndexPort | None = None,
        modal: EditModalPort | None = None,
        confirm: ConfirmPort | None = None,
        browser: BrowserPort | None = None,
        form: LinkFormPort | None = None,
    ) -> SyncEngine:
        rules = rules or Rules()
        messages = rules.messages

        # Adapters
        loop_timers = LoopTimers(frame_interval=rules.timing.frame_interval_ms / 1000)
        timers = timers or loop_timers
        frames = frames or loop_timers
        table = table or MemoryLinkTable()
        banner = banner or MemoryBanner()
        modal = modal or MemoryEditModal()
        form = form or MemoryLinkForm()

        # Components
        snapshot = LinkStore()
        gate = ActionGate()
        renderer = RenderScheduler(
            table,
            frames,
            search or RecordingSearchIndex(),
            empty_message=messages.empty_page,
            no_page_message=messages.no_page_selected,
        )
        notifier = SyncStatusNotifier(banner, timers, rules.timing, messages.syncing)
        coordinator = PageLoadCoordinator(
            store, pages, snapshot, renderer, notifier, timers, rules
        )
        reconciler = OrderReconciler(store, coordinator)
        actions = LinkActions(
            store=store,
            coordinator=coordinator,
            reconciler=reconciler,
            gate=gate,
            notifier=notifier,
            modal=modal,
            confirm=confirm or PresetConfirm(),
            browser=browser or RecordingBrowser(),
            form=form,
            messages=messages,
        )

        return cls(
            rules=rules,
            store=store,
            pages=pages,
            snapshot=snapshot,
            gate=gate,
            renderer=renderer,
            notifier=notifier,
            coordinator=coordinator,
            reconciler=reconciler,
            actions=actions,
            table=table,
            banner=banner,
            modal=modal,
            form=form,
        )

    async def start(self) -> bool:
        """Wait for the page provider, then load the active page."""
        return await self.coordinator.wait_for_readiness()
