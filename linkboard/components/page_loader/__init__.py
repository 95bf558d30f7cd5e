"""
PageLoader component - loads the active page's links into the snapshot.

Also owns the start-up readiness wait and the post-mutation settle step.
"""

from ._impl import PageLoadCoordinator

__all__ = ["PageLoadCoordinator"]
