"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from curve_quoter.models.snapshot import ConfigStateModel, PoolStateModel
from curve_quoter.pools.parsing import parse_config_state, parse_pool_state
from curve_quoter.pools.types import ConfigSnapshot, PoolSnapshot

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SNAPSHOTS_DIR = FIXTURES_DIR / "snapshots"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


def load_snapshot_json(name: str) -> dict:
    """Load a raw pool/config snapshot pair by name.

    Args:
        name: Fixture name (e.g., "launch_pool")

    Returns:
        Dict with "pool" and "config" keys in account JSON form
    """
    path = SNAPSHOTS_DIR / f"{name}.json"
    with open(path) as f:
        return json.load(f)


def load_snapshot_fixture(name: str) -> tuple[PoolSnapshot, ConfigSnapshot]:
    """Load and parse a pool/config snapshot pair by name."""
    data = load_snapshot_json(name)
    pool = parse_pool_state(PoolStateModel.model_validate(data["pool"]))
    config = parse_config_state(ConfigStateModel.model_validate(data["config"]))
    return pool, config


@pytest.fixture
def launch_snapshot_json() -> dict:
    """Raw JSON of a freshly launched single-segment pool."""
    return load_snapshot_json("launch_pool")


@pytest.fixture
def launch_snapshots() -> tuple[PoolSnapshot, ConfigSnapshot]:
    """Parsed snapshots of a freshly launched single-segment pool."""
    return load_snapshot_fixture("launch_pool")
