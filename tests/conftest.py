"""Shared test fixtures for the configs test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from configs import Config


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_file(fixtures_dir: Path) -> Path:
    """Path to the sample development/production configuration."""
    return fixtures_dir / "config.json"


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A document exercising every node kind."""
    return {
        "development": {
            "database": {
                "host": "localhost",
                "port": 12345,
                "ratio": 0.75,
                "enabled": True,
                "debug": "false",
                "timeout": "30",
                "threshold": "2.5",
                "replicas": ["db1", "db2", "db3"],
                "options": {"ssl": False, "pool": 8},
            },
        },
        "servers": [
            {"name": "alpha", "weight": 42.0},
            {"name": "beta", "weight": 42.5},
        ],
        "empty_list": [],
        "empty_map": {},
    }


@pytest.fixture
def config(sample_document: dict[str, Any]) -> Config:
    return Config(sample_document)


@pytest.fixture
def write_json(tmp_path: Path) -> Any:
    """Factory writing a document (or raw text) to a temp file and returning its path."""

    def factory(data: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(data, (str, bytes)):
            path.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return factory
