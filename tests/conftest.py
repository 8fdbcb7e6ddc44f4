"""Pytest configuration and fixtures."""

import copy
from pathlib import Path
from typing import Any, Callable

import pytest

from zmanreg.load import BUNDLED_DATA_PATH, load_reference_data
from zmanreg.registry import reset_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Every test starts (and ends) with no process-wide registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def reference_data() -> dict[str, Any]:
    """A mutable copy of the bundled reference data."""
    return copy.deepcopy(load_reference_data())


@pytest.fixture
def bundled_text() -> str:
    return BUNDLED_DATA_PATH.read_text(encoding="utf-8")


@pytest.fixture
def write_data(tmp_path: Path) -> Callable[[str], Path]:
    """Write a reference data file and return its path."""

    def _write(text: str, name: str = "zmanim.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
