"""
SyncStatus component - transient, debounced status banner.
"""

from ._impl import SyncStatusNotifier

__all__ = ["SyncStatusNotifier"]
