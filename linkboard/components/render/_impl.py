"""
RenderScheduler - frame-coalesced link table rendering.

Key behaviors:
- schedule() cancels any pending frame request before requesting a new one
- Rows are built into one markup string and written to the view once
- An empty list renders a placeholder row and hides clear-all
- The search index is refreshed once after every render
- Every piece of link text is escaped before it enters markup
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Literal

from linkboard.components.link_store import sort_links
from linkboard.domain.entities import Link
from linkboard.domain.sanitize import escape_markup
from linkboard.ports.clock import FramePort, TimerHandle
from linkboard.ports.ui import LinkTableViewPort, SearchIndexPort

logger = logging.getLogger(__name__)

COLUMN_COUNT = 4

PlaceholderTone = Literal["muted", "alert"]


# --- Markup ---


def build_placeholder_row(text: str, tone: PlaceholderTone = "muted") -> str:
    return (
        f'<tr class="placeholder-row {tone}">'
        f'<td colspan="{COLUMN_COUNT}">{escape_markup(text)}</td></tr>'
    )


def build_row(link: Link, index: int, total: int) -> str:
    """Markup for one row; index is the 0-based display position."""
    link_id = escape_markup(link.id)
    name = escape_markup(link.name)
    url = escape_markup(link.url)
    up_disabled = " disabled" if index == 0 else ""
    down_disabled = " disabled" if index == total - 1 else ""

    return (
        f'<tr data-link-id="{link_id}">'
        f"<td>{index + 1}</td>"
        f"<td>{name}</td>"
        f'<td><button class="url-button" data-url="{url}" title="{url}">Open</button></td>'
        '<td><div class="action-buttons">'
        f'<button class="move-up-button"{up_disabled}>Up</button>'
        f'<button class="move-down-button"{down_disabled}>Down</button>'
        f'<button class="edit-link-button" data-name="{name}" data-url="{url}">Edit</button>'
        '<button class="delete-link-button">Delete</button>'
        "</div></td></tr>"
    )


def build_rows_markup(links: Sequence[Link]) -> str:
    """Markup for every row of an already ordered link list."""
    total = len(links)
    return "".join(build_row(link, index, total) for index, link in enumerate(links))


# --- Scheduler ---


class RenderScheduler:
    def __init__(
        self,
        view: LinkTableViewPort,
        frames: FramePort,
        search: SearchIndexPort | None = None,
        empty_message: str = "No links on this page",
        no_page_message: str = "No page is selected",
    ) -> None:
        self._view = view
        self._frames = frames
        self._search = search
        self._empty_message = empty_message
        self._no_page_message = no_page_message
        self._pending: TimerHandle | None = None
        self._pending_links: list[Link] = []
        self.render_count = 0
        self.last_rendered: list[Link] = []

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, links: Sequence[Link]) -> None:
        """Request a render of links at the next frame, superseding any pending request."""
        self._cancel_pending()
        self._pending_links = list(links)
        self._pending = self._frames.request_frame(partial(self._on_frame, self._pending_links))

    def flush(self) -> bool:
        """Run a pending render immediately instead of at the frame boundary."""
        if self._pending is None:
            return False
        links = self._pending_links
        self._cancel_pending()
        self.render_now(links)
        return True

    def render_no_page(self) -> None:
        """Show the explicit "no page selected" state right away."""
        self._cancel_pending()
        self._view.write_rows(build_placeholder_row(self._no_page_message, tone="alert"))
        self._view.set_clear_all_visible(False)

    def render_now(self, links: Sequence[Link]) -> None:
        ordered = sort_links(links)

        if ordered:
            self._view.write_rows(build_rows_markup(ordered))
        else:
            self._view.write_rows(build_placeholder_row(self._empty_message))
        self._view.set_clear_all_visible(bool(ordered))

        self.render_count += 1
        self.last_rendered = ordered
        if self._search is not None:
            self._search.refresh()

        logger.info(f"Rendered {len(ordered)} links")

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._frames.cancel_frame(self._pending)
            self._pending = None

    def _on_frame(self, links: list[Link]) -> None:
        self._pending = None
        self.render_now(links)
