"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture
def sample_config() -> dict:
    """Return an explicit configuration mapping."""

    return {
        "app": {"name": "demo", "debug": False},
        "database": {"host": "db.internal", "port": 5432, "replicas": ["r1", "r2"]},
        "servers": [{"host": "a.example"}, {"host": "b.example"}],
    }


@pytest.fixture
def sample_defaults() -> dict:
    """Return a defaults mapping that partly overlaps sample_config."""

    return {
        "app": {"name": "default-app", "timeout": 30},
        "database": {"host": "localhost", "user": "admin"},
        "cache": {"enabled": True, "ttl": None},
    }
