"""
Actions component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from linkboard.domain.entities import OutcomeKind

ActionTag = Literal[
    "open_url",
    "delete",
    "move_up",
    "move_down",
    "edit",
    "add",
    "clear_all",
    "save_edit",
]

# Element role -> action it triggers
ROLE_ACTIONS: dict[str, ActionTag] = {
    "url-button": "open_url",
    "delete-link-button": "delete",
    "move-up-button": "move_up",
    "move-down-button": "move_down",
    "edit-link-button": "edit",
    "add-link-button": "add",
    "clear-all-button": "clear_all",
    "save-edit-button": "save_edit",
}


# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ActionOutcome:
    """Result of one user action."""

    action: ActionTag | None
    kind: OutcomeKind
    message: str | None = None
    errors: tuple[LinkValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.kind == "ok"
