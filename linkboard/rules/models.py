from typing import Literal

from pydantic import BaseModel, Field


class TimingRules(BaseModel):
    # Fixed wait after a mutation before reloading, used only when the
    # store offers no visibility acknowledgement.
    settle_delay_ms: int = Field(default=600, ge=0)
    frame_interval_ms: int = Field(default=16, ge=1)
    status_visible_ms: int = Field(default=2000, ge=0)
    status_error_visible_ms: int = Field(default=4000, ge=0)
    status_fade_ms: int = Field(default=300, ge=0)

class ReadinessRules(BaseModel):
    poll_interval_ms: int = Field(default=100, ge=1)
    max_attempts: int = Field(default=100, ge=1)

class MessageRules(BaseModel):
    syncing: str = "Synchronizing data..."
    loading: str = "Loading..."
    adding: str = "Adding..."
    added: str = "Added!"
    deleting: str = "Deleting..."
    deleted: str = "Deleted!"
    moving_up: str = "Moving up..."
    moving_down: str = "Moving down..."
    saving: str = "Saving..."
    saved: str = "Saved!"
    clearing: str = "Deleting all links..."
    cleared: str = "Page cleared!"
    missing_fields: str = "Fill in both the name and the URL!"
    no_page: str = "No page is selected!"
    add_failed: str = "Could not save the link."
    delete_failed: str = "Could not delete the link."
    move_failed: str = "Could not move the link."
    save_failed: str = "Could not save the changes."
    # Formatted with succeeded= and total=
    clear_partial: str = "Deleted {succeeded}/{total}."
    clear_failed: str = "Bulk delete failed."
    readiness_timeout: str = "System failed to load"
    confirm_delete: str = "Really delete this link? This cannot be undone."
    confirm_clear: str = "Really delete ALL links on THIS page?"
    confirm_clear_again: str = "Are you sure? This cannot be undone!"
    empty_page: str = "No links on this page"
    no_page_selected: str = "No page is selected"

class StoreRules(BaseModel):
    backend: Literal["memory", "sqlite"] = "memory"
    db_path: str = "linkboard.db"
    default_page_id: str | None = "home"

class Rules(BaseModel):
    timing: TimingRules = Field(default_factory=TimingRules)
    readiness: ReadinessRules = Field(default_factory=ReadinessRules)
    messages: MessageRules = Field(default_factory=MessageRules)
    store: StoreRules = Field(default_factory=StoreRules)
