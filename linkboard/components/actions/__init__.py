"""
Actions component - click-delegated user actions on the link table.

One listener resolves the clicked element's role to an action tag and runs
the matching handler from an explicit dispatch table.
"""

from ._impl import LinkActions, resolve_action, validate_link_data
from .models import (
    ROLE_ACTIONS,
    ActionOutcome,
    ActionTag,
    LinkValidationError,
)

__all__ = [
    # Entry points
    "LinkActions",
    "resolve_action",
    "validate_link_data",
    # Models
    "ActionOutcome",
    "ActionTag",
    "LinkValidationError",
    "ROLE_ACTIONS",
]
