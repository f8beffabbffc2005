"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def tank_source(fixtures_dir: Path) -> str:
    """Source of a unit file with core, graphics and movement sections."""
    return (fixtures_dir / "tank.ini").read_text(encoding="utf-8")
