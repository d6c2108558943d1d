from __future__ import annotations

import pytest

from portfolio_index.builder import build_index
from portfolio_index.config import IndexConfig
from portfolio_index.errors import SourceNotFoundError
from portfolio_index.migrate import migrate_to_csv
from portfolio_index.sources import FolderSource, TabularSource
from portfolio_index.tabular import parse_records


def test_migration_writes_one_row_per_folder(config: IndexConfig, make_model_folder) -> None:
    make_model_folder(
        "chair01",
        info={"title": "Chair, oak", "description": 'The "good" chair', "vertices": 1204},
        files=("side.png", "thumbnail.png"),
    )
    make_model_folder("stool", files=("a.png", "b.png"))

    assert migrate_to_csv(config) == 2

    rows = parse_records(config.csv_path.read_text(encoding="utf-8"))
    assert list(rows[0]) == list(config.columns)
    chair, stool = rows
    assert chair["title"] == "Chair, oak"
    assert chair["description"] == 'The "good" chair'
    assert chair["vertices"] == "1204"
    assert chair["thumbnail"] == "chair01/thumbnail.png"
    assert chair["image1"] == "chair01/side.png"
    assert chair["image2"] == ""
    assert stool["title"] == "stool"
    assert stool["category"] == "Uncategorized"
    assert stool["thumbnail"] == "stool/a.png"
    assert stool["image1"] == "stool/b.png"


def test_migration_caps_images_at_five_columns(config: IndexConfig, make_model_folder, caplog) -> None:
    make_model_folder("big", info={"title": "Big"}, files=tuple(f"{n}.png" for n in range(8)))

    migrate_to_csv(config)

    row = parse_records(config.csv_path.read_text(encoding="utf-8"))[0]
    assert row["thumbnail"] == "big/0.png"
    assert [row[c] for c in config.image_columns] == [f"big/{n}.png" for n in range(1, 6)]
    assert "not migrated" in caplog.text


def test_migrated_csv_rebuilds_the_same_gallery(config: IndexConfig, make_model_folder) -> None:
    make_model_folder("chair01", info={"title": "Chair", "category": "Furniture"}, files=("thumbnail.png", "side.png"))
    make_model_folder("lamp", info={"title": "Lamp"}, files=("b.jpg", "a.jpg"))

    from_folders = build_index(FolderSource(config), config)
    migrate_to_csv(config)
    from_csv = build_index(TabularSource(config), config)

    keys = ("id", "title", "category", "thumbnail", "images")
    assert [{k: i[k] for k in keys} for i in from_csv] == [{k: i[k] for k in keys} for i in from_folders]


def test_migration_needs_models_directory(tmp_path) -> None:
    with pytest.raises(SourceNotFoundError):
        migrate_to_csv(IndexConfig.from_root(tmp_path))
