import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from fastapi import Request

from linkboard.adapters.memory_store import CachedLinkStore
from linkboard.adapters.memory_ui import (
    MemoryBanner,
    MemoryEditModal,
    MemoryLinkTable,
    PresetConfirm,
)
from linkboard.adapters.pages import StaticPageProvider
from linkboard.adapters.sqlite_store import SQLiteLinkStore
from linkboard.engine import SyncEngine
from linkboard.ports.store import RemoteLinkStorePort
from linkboard.rules.loader import load_rules
from linkboard.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self, rules_path: Path | None = None, db_path: str | None = None) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = rules_path or Path(
            os.environ.get("LINKBOARD_RULES_PATH", self.base_dir / "rules.yaml")
        )
        self.db_path = db_path or os.environ.get("LINKBOARD_DB_PATH")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def read_rules(settings: Settings) -> Rules:
    """Load rules from disk; a missing file means defaults."""
    if not settings.rules_path.exists():
        logger.warning(f"No rules file at {settings.rules_path}, using defaults")
        return Rules()
    return load_rules(settings.rules_path)


# --- Engine ---
@dataclass
class PageSession:
    """The engine plus the concrete adapters the HTTP routes drive directly."""

    engine: SyncEngine
    pages: StaticPageProvider
    modal: MemoryEditModal
    table: MemoryLinkTable
    banner: MemoryBanner


def build_store(rules: Rules, settings: Settings) -> RemoteLinkStorePort:
    if rules.store.backend == "sqlite":
        return SQLiteLinkStore(settings.db_path or rules.store.db_path)
    return CachedLinkStore()


def build_session(rules: Rules, settings: Settings) -> PageSession:
    pages = StaticPageProvider(rules.store.default_page_id)
    modal = MemoryEditModal()
    table = MemoryLinkTable()
    banner = MemoryBanner()
    engine = SyncEngine.create(
        build_store(rules, settings),
        pages,
        rules,
        table=table,
        banner=banner,
        modal=modal,
        # HTTP callers confirm destructive actions before sending them
        confirm=PresetConfirm(default=True),
    )
    return PageSession(engine=engine, pages=pages, modal=modal, table=table, banner=banner)


def get_session(request: Request) -> PageSession:
    session: PageSession = request.app.state.session
    return session


def get_engine(request: Request) -> SyncEngine:
    return get_session(request).engine
