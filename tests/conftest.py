"""
Shared pytest fixtures for the gallery index tests.

Provides:
- a throwaway site root with an empty assets/models/ tree
- factories for model folders and the products CSV
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from portfolio_index.config import COLUMNS, IndexConfig  # noqa: E402
from portfolio_index.tabular import format_records  # noqa: E402


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Site root containing assets/models/."""
    (tmp_path / "assets" / "models").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def config(site: Path) -> IndexConfig:
    return IndexConfig.from_root(site)


@pytest.fixture
def make_model_folder(config: IndexConfig) -> Callable[..., Path]:
    """Create assets/models/<id>/ with optional info.json and files."""

    def _make(item_id: str, info: Any = None, files: tuple[str, ...] = (), raw_info: str | None = None) -> Path:
        folder = config.models_path / item_id
        folder.mkdir(parents=True, exist_ok=True)
        if raw_info is not None:
            (folder / "info.json").write_text(raw_info, encoding="utf-8")
        elif info is not None:
            (folder / "info.json").write_text(json.dumps(info), encoding="utf-8")
        for name in files:
            (folder / name).write_bytes(b"fake-" + name.encode())
        return folder

    return _make


@pytest.fixture
def write_csv(config: IndexConfig) -> Callable[[list[dict[str, str]]], Path]:
    """Write products_data.csv under the standard header."""

    def _write(rows: list[dict[str, str]]) -> Path:
        config.csv_path.write_text(format_records(rows, COLUMNS), encoding="utf-8")
        return config.csv_path

    return _write
