from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
Direction = Literal["up", "down"]
ReorderResult = Literal["swapped", "boundary", "not_found", "failed"]
OutcomeKind = Literal[
    "ok", "boundary", "rejected", "invalid", "failed", "cancelled", "ignored", "not_found"
]

# --- Links ---

class Link(BaseModel):
    """A named link owned by exactly one page."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str
    url: str
    order_index: int = 0
    page_id: str

class EditedLink(BaseModel):
    """Values read back from the edit modal on save."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    url: str
    page_id: str | None = None

# --- UI ---

class UiElement(BaseModel):
    """The element a delegated click originated from."""

    role: str
    link_id: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)

class BannerState(BaseModel):
    message: str = ""
    is_error: bool = False
    displayed: bool = False
    opacity: float = 0.0
