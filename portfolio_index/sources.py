"""Catalog sources: where raw item records come from.

Two interchangeable sources feed the index builder:

FolderSource   assets/models/<id>/info.json plus the loose images next to it.
               info.json example (assets/models/chair01/info.json):
               {
                 "title": "Chair",
                 "category": "Furniture",
                 "description": "Low-poly dining chair.",
                 "vertices": "1,204",
                 "polyCount": "2.3k",
                 "marketplaceLink": "https://example.com/chair01"
               }

TabularSource  products_data.csv, one row per item. Cells in thumbnail and
               image1..image5 may point at URLs, files already under
               assets/, paths relative to assets/models/, or absolute paths
               anywhere on disk (those get copied into assets/models/<id>/).
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from .config import DISPLAY_FIELDS, IndexConfig
from .errors import SourceNotFoundError, SourceReadError
from .paths import PathResolver
from .tabular import parse_records

log = logging.getLogger(__name__)


class CatalogSource(Protocol):
    def collect(self) -> list[dict]:
        """Return raw item records in source order."""


def load_metadata(path: Path) -> dict | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        log.warning("Error parsing %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        log.warning("Error parsing %s: expected a JSON object", path)
        return None
    return data


def item_folders(models_dir: Path) -> list[Path]:
    if not models_dir.is_dir():
        raise SourceNotFoundError(models_dir, "models directory")
    return [
        d
        for d in sorted(models_dir.iterdir())
        if d.is_dir() and not d.name.startswith((".", "_"))
    ]


def list_images(folder: Path, config: IndexConfig) -> list[str]:
    return [f.name for f in sorted(folder.iterdir()) if f.is_file() and config.is_image(f)]


def pick_thumbnail(images: list[str], prefix: str = "thumbnail.") -> Optional[str]:
    """An explicit thumbnail.* wins, otherwise the first image."""
    for name in images:
        if name.lower().startswith(prefix):
            return name
    return images[0] if images else None


class FolderSource:
    def __init__(self, config: IndexConfig):
        self.config = config

    def collect(self) -> list[dict]:
        folders = item_folders(self.config.models_path)
        log.info("Scanning %s...", self.config.models_path)
        records = []
        for folder in folders:
            record = self.collect_folder(folder)
            if record is not None:
                records.append(record)
        return records

    def collect_folder(self, folder: Path) -> dict | None:
        cfg = self.config
        meta_path = folder / cfg.metadata_name
        if not meta_path.is_file():
            log.info("Skipping %s: No %s found.", folder.name, cfg.metadata_name)
            return None
        info = load_metadata(meta_path)
        if info is None:
            return None

        images = list_images(folder, cfg)
        thumb = pick_thumbnail(images, cfg.thumbnail_prefix)
        # Full strip, thumbnail first.
        ordered = [thumb] + [n for n in images if n != thumb] if thumb else []

        if not info.get("title"):
            log.warning("%s/%s missing 'title'", folder.name, cfg.metadata_name)

        record = dict(info)
        record["id"] = folder.name
        record["title"] = info.get("title") or folder.name
        record["thumbnail"] = cfg.site_relative(folder.name, thumb) if thumb else ""
        record["images"] = [cfg.site_relative(folder.name, n) for n in ordered]
        if not record.get("modelUrl"):
            model = next((f.name for f in sorted(folder.iterdir()) if f.is_file() and cfg.is_model(f)), None)
            if model:
                record["modelUrl"] = cfg.site_relative(folder.name, model)

        log.info("Loaded: %s", record["title"])
        return record


def valid_item_id(item_id: str) -> bool:
    return item_id not in (".", "..") and "/" not in item_id and "\\" not in item_id


class TabularSource:
    def __init__(self, config: IndexConfig, resolver: PathResolver | None = None):
        self.config = config
        self.resolver = resolver or PathResolver(config)
        # Import destinations already taken this run, mapped to their source.
        self.claimed: dict[Path, Path] = {}

    def collect(self) -> list[dict]:
        csv_path = self.config.csv_path
        if not csv_path.is_file():
            raise SourceNotFoundError(csv_path, "CSV file")
        try:
            text = csv_path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            raise SourceReadError(csv_path, str(e)) from e
        rows = parse_records(text)
        log.info("Read %d row(s) from %s", len(rows), csv_path.name)

        self.claimed = {}
        records = []
        for n, row in enumerate(rows, start=1):
            item_id = row.get("id", "").strip()
            if not item_id:
                log.warning("Row %d has no id, skipping", n)
                continue
            if not valid_item_id(item_id):
                log.warning("Row %d: invalid id %r, skipping", n, item_id)
                continue
            records.append(self.collect_row(item_id, row))
        return records

    def collect_row(self, item_id: str, row: dict) -> dict:
        cfg = self.config
        cfg.item_dir(item_id).mkdir(parents=True, exist_ok=True)

        def resolve(raw):
            return self.resolver.resolve_and_import(raw, item_id, self.claimed)

        thumbnail = resolve(row.get("thumbnail", "")) or ""
        images = []
        for column in cfg.image_columns:
            path = resolve(row.get(column, ""))
            if path and path not in images:
                images.append(path)
        if thumbnail and thumbnail not in images:
            images.insert(0, thumbnail)

        record = {
            "id": item_id,
            "title": row.get("title") or cfg.default_title,
            "category": row.get("category") or cfg.default_category,
        }
        for key in DISPLAY_FIELDS:
            record[key] = row.get(key, "")
        record["thumbnail"] = thumbnail
        record["images"] = images
        if row.get("modelUrl"):
            record["modelUrl"] = resolve(row["modelUrl"]) or ""

        log.info("Loaded: %s", record["title"])
        return record
