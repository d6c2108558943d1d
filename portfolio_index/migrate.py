"""Convert the assets/models/<id>/info.json layout into products_data.csv.

Every item folder becomes one row. The thumbnail goes in its own column and
up to five other images fill image1..image5, all written relative to
assets/models/ so the tabular build resolves them back to the same files.
"""

import logging
from pathlib import Path

from .builder import as_text
from .config import DISPLAY_FIELDS, IndexConfig
from .emit import atomic_write
from .sources import item_folders, list_images, load_metadata, pick_thumbnail
from .tabular import format_records

log = logging.getLogger(__name__)


def folder_row(folder: Path, config: IndexConfig) -> dict:
    data = {
        "title": folder.name,
        "description": "",
        "category": config.default_category,
    }
    meta_path = folder / config.metadata_name
    if meta_path.is_file():
        info = load_metadata(meta_path)
        if info:
            data.update({k: v for k, v in info.items() if v not in (None, "")})

    row = {"id": folder.name}
    for key in ("title", "description", "category") + DISPLAY_FIELDS:
        row[key] = as_text(data.get(key))

    images = list_images(folder, config)
    thumb = pick_thumbnail(images, config.thumbnail_prefix)
    others = [n for n in images if n != thumb]
    row["thumbnail"] = f"{folder.name}/{thumb}" if thumb else ""
    for column, name in zip(config.image_columns, others):
        row[column] = f"{folder.name}/{name}"
    if len(others) > len(config.image_columns):
        log.warning(
            "%s: %d image(s) beyond %s not migrated",
            folder.name,
            len(others) - len(config.image_columns),
            config.image_columns[-1],
        )
    return row


def migrate_to_csv(config: IndexConfig) -> int:
    """Write products_data.csv from the item folders; returns the row count."""
    folders = item_folders(config.models_path)
    log.info("Migrating %s to %s...", config.models_dir, config.csv_file)

    rows = []
    for folder in folders:
        rows.append(folder_row(folder, config))
        log.info("Migrated %s", folder.name)

    atomic_write(config.csv_path, format_records(rows, config.columns))
    return len(rows)
