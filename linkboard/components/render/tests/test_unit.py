"""
Render component unit tests.

Tests frame coalescing, batch writes and markup escaping.
"""

from __future__ import annotations

import pytest

from linkboard.adapters.manual_timers import ManualTimers
from linkboard.adapters.memory_ui import MemoryLinkTable, RecordingSearchIndex
from linkboard.components.render import (
    RenderScheduler,
    build_placeholder_row,
    build_row,
    build_rows_markup,
)
from linkboard.domain.entities import Link


def make_link(link_id: str, order_index: int, name: str | None = None) -> Link:
    return Link(
        id=link_id,
        name=name or f"Link {link_id}",
        url=f"https://example.com/{link_id}",
        order_index=order_index,
        page_id="home",
    )


@pytest.fixture
def frames() -> ManualTimers:
    return ManualTimers()


@pytest.fixture
def table() -> MemoryLinkTable:
    return MemoryLinkTable()


@pytest.fixture
def search() -> RecordingSearchIndex:
    return RecordingSearchIndex()


@pytest.fixture
def scheduler(
    table: MemoryLinkTable, frames: ManualTimers, search: RecordingSearchIndex
) -> RenderScheduler:
    return RenderScheduler(table, frames, search)


class TestCoalescing:
    def test_nothing_renders_before_the_frame(
        self, scheduler: RenderScheduler, table: MemoryLinkTable
    ) -> None:
        scheduler.schedule([make_link("a", 0)])

        assert table.writes == 0
        assert scheduler.pending is True

    def test_many_schedules_render_once_with_last_value(
        self,
        scheduler: RenderScheduler,
        table: MemoryLinkTable,
        frames: ManualTimers,
        search: RecordingSearchIndex,
    ) -> None:
        for count in range(1, 11):
            scheduler.schedule([make_link(str(i), i) for i in range(count)])

        assert frames.flush_frames() == 1
        assert table.writes == 1
        assert scheduler.render_count == 1
        assert len(scheduler.last_rendered) == 10
        assert search.refreshes == 1

    def test_each_frame_renders_its_own_last_value(
        self, scheduler: RenderScheduler, frames: ManualTimers
    ) -> None:
        scheduler.schedule([make_link("a", 0)])
        frames.flush_frames()
        scheduler.schedule([make_link("b", 0)])
        scheduler.schedule([make_link("c", 0)])
        frames.flush_frames()

        assert scheduler.render_count == 2
        assert [link.id for link in scheduler.last_rendered] == ["c"]

    def test_flush_renders_pending_immediately(
        self, scheduler: RenderScheduler, table: MemoryLinkTable, frames: ManualTimers
    ) -> None:
        scheduler.schedule([make_link("a", 0)])

        assert scheduler.flush() is True
        assert table.writes == 1
        assert frames.flush_frames() == 0
        assert scheduler.flush() is False


class TestRendering:
    def test_rows_are_sorted_by_order_index(
        self, scheduler: RenderScheduler, table: MemoryLinkTable
    ) -> None:
        scheduler.render_now([make_link("c", 9), make_link("a", 1), make_link("b", 4)])

        positions = [table.markup.index(f'data-link-id="{i}"') for i in ("a", "b", "c")]
        assert positions == sorted(positions)
        assert [link.id for link in scheduler.last_rendered] == ["a", "b", "c"]

    def test_empty_list_renders_placeholder_and_hides_clear_all(
        self, scheduler: RenderScheduler, table: MemoryLinkTable, search: RecordingSearchIndex
    ) -> None:
        table.set_clear_all_visible(True)
        scheduler.render_now([])

        assert "placeholder-row" in table.markup
        assert "No links on this page" in table.markup
        assert table.clear_all_visible is False
        assert search.refreshes == 1

    def test_non_empty_list_shows_clear_all(
        self, scheduler: RenderScheduler, table: MemoryLinkTable
    ) -> None:
        scheduler.render_now([make_link("a", 0)])

        assert table.clear_all_visible is True

    def test_no_page_cancels_pending_render(
        self, scheduler: RenderScheduler, table: MemoryLinkTable, frames: ManualTimers
    ) -> None:
        scheduler.schedule([make_link("a", 0)])
        scheduler.render_no_page()

        assert frames.flush_frames() == 0
        assert "No page is selected" in table.markup
        assert table.clear_all_visible is False


class TestMarkup:
    def test_first_row_cannot_move_up_last_cannot_move_down(self) -> None:
        links = [make_link("a", 0), make_link("b", 1), make_link("c", 2)]
        first, middle, last = (build_row(link, i, 3) for i, link in enumerate(links))

        assert '<button class="move-up-button" disabled>' in first
        assert '<button class="move-down-button">' in first
        assert '<button class="move-up-button">' in middle
        assert '<button class="move-down-button">' in middle
        assert '<button class="move-down-button" disabled>' in last

    def test_positions_are_one_based(self) -> None:
        markup = build_rows_markup([make_link("a", 5), make_link("b", 8)])

        assert "<td>1</td>" in markup
        assert "<td>2</td>" in markup

    def test_text_is_escaped(self) -> None:
        link = Link(
            id="x",
            name="<script>alert('x')</script>",
            url='https://example.com/?q="><img>',
            order_index=0,
            page_id="home",
        )
        row = build_row(link, 0, 1)

        assert "<script>" not in row
        assert "&lt;script&gt;" in row
        assert '"><img>' not in row
        assert "&quot;&gt;&lt;img&gt;" in row

    def test_placeholder_escapes_text(self) -> None:
        row = build_placeholder_row("<b>none</b>", tone="alert")

        assert "&lt;b&gt;" in row
        assert 'class="placeholder-row alert"' in row
