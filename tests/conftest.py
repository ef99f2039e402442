from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

if TYPE_CHECKING:  # pragma: no cover - hints only
    from fastapi.testclient import TestClient


def make_members(total: int) -> list[dict[str, Any]]:
    """Build ``total`` minimal member records with sequential ids."""

    return [
        {"id": f"member-{index}", "email_address": f"user{index}@example.com", "status": "subscribed"}
        for index in range(total)
    ]


@pytest.fixture
def write_fixture(tmp_path: Path) -> Callable[..., Path]:
    """Write a fixture document (or raw text) to a temporary file."""

    def writer(document: Any = None, *, raw: str | None = None, name: str = "mock-data.json") -> Path:
        path = tmp_path / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return writer


@pytest.fixture
def make_client(
    monkeypatch: pytest.MonkeyPatch, write_fixture: Callable[..., Path]
) -> Callable[..., TestClient]:
    """Factory fixture to build a TestClient over a generated fixture document."""

    def factory(members: list[Any] | None = None, **fields: Any) -> TestClient:
        from fastapi.testclient import TestClient
        from mailchimp_mock import config as app_config
        from mailchimp_mock.main import create_app

        document = {"members": make_members(5) if members is None else members, **fields}
        monkeypatch.setenv("MOCK_FIXTURE_PATH", str(write_fixture(document)))
        app_config.get_settings.cache_clear()

        return TestClient(create_app())

    yield factory

    from mailchimp_mock import config as app_config

    app_config.get_settings.cache_clear()
