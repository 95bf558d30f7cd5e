"""
LinkStore component - in-memory snapshot of the active page's links.

The snapshot is only ever replaced wholesale after a reload; there are no
incremental mutation methods.
"""

from ._impl import LinkStore, sort_links

__all__ = [
    "LinkStore",
    "sort_links",
]
