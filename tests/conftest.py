"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def simple_html() -> str:
    return _read_fixture("simple.html")


@pytest.fixture
def form_html() -> str:
    return _read_fixture("form.html")


@pytest.fixture
def form_path() -> Path:
    return FIXTURES_DIR / "form.html"
