"""
Ordering component unit tests.
"""

from __future__ import annotations

import asyncio

import pytest

from linkboard.adapters.manual_timers import ManualTimers
from linkboard.adapters.memory_store import InMemoryLinkStore
from linkboard.adapters.memory_ui import MemoryBanner, MemoryLinkTable
from linkboard.adapters.pages import StaticPageProvider
from linkboard.components.link_store import LinkStore
from linkboard.components.ordering import OrderReconciler
from linkboard.components.page_loader import PageLoadCoordinator
from linkboard.components.render import RenderScheduler
from linkboard.components.sync_status import SyncStatusNotifier
from linkboard.domain.entities import Link


@pytest.fixture
def store() -> InMemoryLinkStore:
    return InMemoryLinkStore(
        [
            Link(id="1", name="One", url="https://one", order_index=0, page_id="home"),
            Link(id="2", name="Two", url="https://two", order_index=1, page_id="home"),
            Link(id="3", name="Three", url="https://three", order_index=2, page_id="home"),
        ]
    )


@pytest.fixture
def timers() -> ManualTimers:
    return ManualTimers()


@pytest.fixture
def coordinator(store: InMemoryLinkStore, timers: ManualTimers) -> PageLoadCoordinator:
    coordinator = PageLoadCoordinator(
        store,
        StaticPageProvider("home"),
        LinkStore(),
        RenderScheduler(MemoryLinkTable(), timers),
        SyncStatusNotifier(MemoryBanner(), timers),
        timers,
    )
    asyncio.run(coordinator.load_active_page())
    store.calls.clear()
    return coordinator


@pytest.fixture
def reconciler(store: InMemoryLinkStore, coordinator: PageLoadCoordinator) -> OrderReconciler:
    return OrderReconciler(store, coordinator)


def test_move_up_swaps_with_previous_and_reloads(
    reconciler: OrderReconciler,
    store: InMemoryLinkStore,
    coordinator: PageLoadCoordinator,
    timers: ManualTimers,
) -> None:
    result = asyncio.run(reconciler.move_adjacent("2", "up"))

    assert result == "swapped"
    assert store.calls_to("swap_order") == [("2", 1, "1", 0)]
    assert timers.sleeps == [0.6]

    snapshot = coordinator.snapshot
    assert [link.id for link in snapshot.sorted()] == ["2", "1", "3"]
    assert snapshot.get("1").order_index == 1  # type: ignore[union-attr]
    assert snapshot.get("2").order_index == 0  # type: ignore[union-attr]


def test_move_down_swaps_with_next(
    reconciler: OrderReconciler, store: InMemoryLinkStore, coordinator: PageLoadCoordinator
) -> None:
    assert asyncio.run(reconciler.move_adjacent("2", "down")) == "swapped"

    assert store.calls_to("swap_order") == [("2", 1, "3", 2)]
    assert [link.id for link in coordinator.snapshot.sorted()] == ["1", "3", "2"]


@pytest.mark.parametrize(("link_id", "direction"), [("1", "up"), ("3", "down")])
def test_boundary_is_a_no_op(
    reconciler: OrderReconciler,
    store: InMemoryLinkStore,
    timers: ManualTimers,
    link_id: str,
    direction: str,
) -> None:
    result = asyncio.run(reconciler.move_adjacent(link_id, direction))  # type: ignore[arg-type]

    assert result == "boundary"
    assert store.calls == []
    assert timers.sleeps == []


def test_unknown_link_is_not_found(reconciler: OrderReconciler, store: InMemoryLinkStore) -> None:
    assert asyncio.run(reconciler.move_adjacent("missing", "up")) == "not_found"
    assert store.calls == []


def test_failed_swap_skips_settle_and_reload(
    reconciler: OrderReconciler,
    store: InMemoryLinkStore,
    coordinator: PageLoadCoordinator,
    timers: ManualTimers,
) -> None:
    store.fail_ids.add("1")

    assert asyncio.run(reconciler.move_adjacent("2", "up")) == "failed"
    assert timers.sleeps == []
    assert store.calls_to("fetch_links_for_page") == []
    assert [link.id for link in coordinator.snapshot.sorted()] == ["1", "2", "3"]


def test_neighbors_follow_order_index_with_gaps() -> None:
    gappy = InMemoryLinkStore(
        [
            Link(id="a", name="A", url="https://a", order_index=10, page_id="home"),
            Link(id="b", name="B", url="https://b", order_index=3, page_id="home"),
        ]
    )
    timers = ManualTimers()
    coordinator = PageLoadCoordinator(
        gappy,
        StaticPageProvider("home"),
        LinkStore(),
        RenderScheduler(MemoryLinkTable(), timers),
        SyncStatusNotifier(MemoryBanner(), timers),
        timers,
    )

    async def scenario() -> str:
        await coordinator.load_active_page()
        return await OrderReconciler(gappy, coordinator).move_adjacent("a", "up")

    assert asyncio.run(scenario()) == "swapped"
    assert gappy.calls_to("swap_order") == [("a", 10, "b", 3)]
    assert [link.id for link in coordinator.snapshot.sorted()] == ["a", "b"]
