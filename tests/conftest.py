from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

from linkboard.api.deps import Settings
from linkboard.api.main import create_app
from linkboard.domain.entities import Link


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def seed_links() -> list[Link]:
    return [
        Link(id="1", name="One", url="https://one", order_index=0, page_id="home"),
        Link(id="2", name="Two", url="https://two", order_index=1, page_id="home"),
        Link(id="3", name="Three", url="https://three", order_index=2, page_id="home"),
    ]


@pytest.fixture
def write_rules(tmp_path: Path):
    """Write a rules file with fast timings merged with the given overrides."""

    def _write(**sections: dict) -> Path:
        data: dict = {
            "timing": {"settle_delay_ms": 0, "frame_interval_ms": 1},
            "readiness": {"poll_interval_ms": 1, "max_attempts": 5},
        }
        for key, value in sections.items():
            data.setdefault(key, {}).update(value)
        path = tmp_path / "rules.yaml"
        path.write_text(yaml.safe_dump(data))
        return path

    return _write


@pytest.fixture
def client(write_rules):
    """TestClient on a memory-backed app, lifespan included."""
    settings = Settings(rules_path=write_rules(store={"backend": "memory"}))
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def sqlite_client(write_rules, tmp_path: Path):
    """TestClient on an app persisting to a temporary SQLite file."""
    db_path = str(tmp_path / "links.db")
    settings = Settings(rules_path=write_rules(store={"backend": "sqlite"}), db_path=db_path)
    with TestClient(create_app(settings)) as test_client:
        yield test_client
