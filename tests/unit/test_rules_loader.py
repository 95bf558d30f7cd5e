"""
Rules loading tests.

Verifies the shipped rules.yaml, defaults, fenced YAML and error reporting.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from linkboard.rules.loader import load_rules
from linkboard.rules.models import Rules


class TestShippedRules:
    def test_project_rules_file_is_valid(self, project_root: Path) -> None:
        rules = load_rules(project_root / "rules.yaml")

        assert rules.timing.settle_delay_ms == 600
        assert rules.readiness.max_attempts == 100
        assert rules.store.default_page_id == "home"


class TestDefaults:
    def test_empty_file_means_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")

        assert load_rules(path) == Rules()

    def test_partial_sections_keep_other_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("timing:\n  settle_delay_ms: 50\n")

        rules = load_rules(path)

        assert rules.timing.settle_delay_ms == 50
        assert rules.timing.status_visible_ms == 2000
        assert rules.messages.clear_partial == "Deleted {succeeded}/{total}."

    def test_messages_are_configurable(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text('messages:\n  added: "Hinzugefuegt!"\n')

        assert load_rules(path).messages.added == "Hinzugefuegt!"


class TestCodeFence:
    def test_yaml_inside_markdown_block(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Rules\n\nSome notes.\n\n```yaml\nreadiness:\n  max_attempts: 7\n```\n\nMore text.\n"
        )

        assert load_rules(path).readiness.max_attempts == 7


class TestErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("timing: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("timing:\n  settle_delay_ms: -5\n")

        with pytest.raises(ValueError, match="validation failed"):
            load_rules(path)

    def test_unknown_backend_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("store:\n  backend: postgres\n")

        with pytest.raises(ValueError):
            load_rules(path)
