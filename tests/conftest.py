"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "documents"


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to document fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def make_document() -> Callable[..., dict[str, Any]]:
    """Factory for raw document payloads with minimal boilerplate."""

    def _factory(
        data: dict[str, Any] | None = None,
        *,
        doc_id: str = "x1",
        slugs: list[str] | None = None,
        lang: str = "en-us",
    ) -> dict[str, Any]:
        return {
            "id": doc_id,
            "type": "product",
            "slugs": slugs if slugs is not None else ["my-product", "old-slug"],
            "lang": lang,
            "data": data if data is not None else {},
        }

    return _factory
