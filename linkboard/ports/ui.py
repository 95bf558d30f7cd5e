from typing import Protocol

from linkboard.domain.entities import EditedLink


class LinkTableViewPort(Protocol):
    def write_rows(self, markup: str) -> None:
        """Replace the whole table body in one write."""
        ...

    def set_clear_all_visible(self, visible: bool) -> None:
        ...


class BannerViewPort(Protocol):
    def show(self, message: str, is_error: bool) -> None:
        """Set the text and make the banner part of the layout at full opacity."""
        ...

    def set_message(self, message: str, is_error: bool) -> None:
        """Set the text only, leaving visibility as it is."""
        ...

    def set_opacity(self, opacity: float) -> None:
        ...

    def set_displayed(self, displayed: bool) -> None:
        ...


class SearchIndexPort(Protocol):
    def refresh(self) -> None:
        ...


class EditModalPort(Protocol):
    def open(self, link_id: str, name: str, url: str) -> None:
        ...

    def get_edited_data(self) -> EditedLink:
        ...

    def is_valid(self) -> bool:
        ...

    def close(self) -> None:
        ...


class ConfirmPort(Protocol):
    def confirm(self, message: str) -> bool:
        ...


class BrowserPort(Protocol):
    def open_url(self, url: str) -> None:
        """Open the url in a new tab."""
        ...


class LinkFormPort(Protocol):
    def read(self) -> tuple[str, str]:
        """Return the raw (name, url) input values."""
        ...

    def clear(self) -> None:
        ...
