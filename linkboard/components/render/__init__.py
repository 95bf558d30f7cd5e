"""
Render component - coalesced, batched rendering of the link table.

At most one table write happens per frame; the last schedule() call before
the frame boundary wins.
"""

from ._impl import (
    RenderScheduler,
    build_placeholder_row,
    build_row,
    build_rows_markup,
)

__all__ = [
    "RenderScheduler",
    "build_placeholder_row",
    "build_row",
    "build_rows_markup",
]
