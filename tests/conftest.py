"""Shared pytest fixtures for Workforce Report tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def source_data_path() -> Path:
    """Path to the sample personnel source document."""
    return FIXTURES_DIR / "source-data.json"


@pytest.fixture
def source_records(source_data_path: Path) -> list:
    with open(source_data_path, encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def make_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for person payloads in source document shape."""

    def _make(
        firstname: Optional[str] = "Ada",
        lastname: Optional[str] = "Lovelace",
        status: str = "active",
        **extra: Any,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"status": status}
        if firstname is not None:
            payload["firstname"] = firstname
        if lastname is not None:
            payload["lastname"] = lastname
        payload.update(extra)
        return payload

    return _make


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep WFR_* variables from the developer shell out of tests."""
    from workforce_report.config import get_settings

    for var in ("WFR_SOURCE_DATA_PATH", "WFR_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
