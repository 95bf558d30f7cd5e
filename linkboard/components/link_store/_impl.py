"""
LinkStore - authoritative snapshot of the links on the active page.

Key behaviors:
- replace() swaps the whole snapshot in one assignment
- all() returns links in the order they were received
- neighbor() resolves adjacency in order_index order, not received order
"""

from __future__ import annotations

from collections.abc import Iterable

from linkboard.domain.entities import Direction, Link


def sort_links(links: Iterable[Link]) -> list[Link]:
    """Return links ordered by order_index ascending (stable)."""
    return sorted(links, key=lambda link: link.order_index)


class LinkStore:
    def __init__(self, links: Iterable[Link] = ()) -> None:
        self._links: tuple[Link, ...] = tuple(links)

    def replace(self, links: Iterable[Link]) -> None:
        self._links = tuple(links)

    def all(self) -> list[Link]:
        return list(self._links)

    def sorted(self) -> list[Link]:
        return sort_links(self._links)

    def get(self, link_id: str) -> Link | None:
        return next((link for link in self._links if link.id == link_id), None)

    def neighbor(self, link_id: str, direction: Direction) -> Link | None:
        """
        Return the link adjacent to link_id in display order.

        None when link_id is first (up), last (down), or not in the snapshot.
        """
        ordered = self.sorted()
        index = next((i for i, link in enumerate(ordered) if link.id == link_id), None)
        if index is None:
            return None

        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(ordered):
            return None
        return ordered[target]

    def next_order_index(self) -> int:
        """Order index for a new link: one past the current maximum, 0 if empty."""
        if not self._links:
            return 0
        return max(link.order_index for link in self._links) + 1

    def __len__(self) -> int:
        return len(self._links)
