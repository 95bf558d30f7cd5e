"""
In-memory view adapters.

These hold the state a browser page would show (table markup, banner,
modal, form fields) so the HTTP shell can serve it and tests can inspect it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from linkboard.domain.entities import BannerState, EditedLink

logger = logging.getLogger(__name__)


class MemoryLinkTable:
    def __init__(self) -> None:
        self.markup = ""
        self.clear_all_visible = False
        self.writes = 0

    def write_rows(self, markup: str) -> None:
        self.markup = markup
        self.writes += 1

    def set_clear_all_visible(self, visible: bool) -> None:
        self.clear_all_visible = visible


class MemoryBanner:
    def __init__(self) -> None:
        self.state = BannerState()
        self.history: list[tuple[str, bool]] = []

    def show(self, message: str, is_error: bool) -> None:
        self.state = BannerState(message=message, is_error=is_error, displayed=True, opacity=1.0)
        self.history.append((message, is_error))

    def set_message(self, message: str, is_error: bool) -> None:
        self.state = self.state.model_copy(update={"message": message, "is_error": is_error})

    def set_opacity(self, opacity: float) -> None:
        self.state = self.state.model_copy(update={"opacity": opacity})

    def set_displayed(self, displayed: bool) -> None:
        self.state = self.state.model_copy(update={"displayed": displayed})

    @property
    def visible(self) -> bool:
        return self.state.displayed and self.state.opacity > 0


class RecordingSearchIndex:
    def __init__(self) -> None:
        self.refreshes = 0

    def refresh(self) -> None:
        self.refreshes += 1


class MemoryEditModal:
    """Edit modal whose fields can be filled programmatically."""

    def __init__(self) -> None:
        self.is_open = False
        self.data: EditedLink | None = None

    def open(self, link_id: str, name: str, url: str) -> None:
        self.data = EditedLink(id=link_id, name=name, url=url)
        self.is_open = True

    def fill(self, name: str | None = None, url: str | None = None, page_id: str | None = None) -> None:
        if self.data is None:
            raise RuntimeError("Modal is not open")
        updates: dict[str, str] = {}
        if name is not None:
            updates["name"] = name
        if url is not None:
            updates["url"] = url
        if page_id is not None:
            updates["page_id"] = page_id
        self.data = self.data.model_copy(update=updates)

    def get_edited_data(self) -> EditedLink:
        if self.data is None:
            raise RuntimeError("Modal is not open")
        return self.data

    def is_valid(self) -> bool:
        return (
            self.data is not None
            and bool(self.data.name.strip())
            and bool(self.data.url.strip())
        )

    def close(self) -> None:
        self.is_open = False


class PresetConfirm:
    """Answers confirmation prompts from a fixed script, then a default."""

    def __init__(self, answers: Iterable[bool] = (), default: bool = True) -> None:
        self._answers = list(answers)
        self.default = default
        self.prompts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        if self._answers:
            return self._answers.pop(0)
        return self.default


class RecordingBrowser:
    def __init__(self) -> None:
        self.opened: list[str] = []

    def open_url(self, url: str) -> None:
        logger.info(f"Opening {url}")
        self.opened.append(url)


class MemoryLinkForm:
    def __init__(self, name: str = "", url: str = "") -> None:
        self.name = name
        self.url = url

    def fill(self, name: str, url: str) -> None:
        self.name = name
        self.url = url

    def read(self) -> tuple[str, str]:
        return self.name, self.url

    def clear(self) -> None:
        self.name = ""
        self.url = ""
