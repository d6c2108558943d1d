"""Turn raw source records into the canonical gallery item list."""

import logging

from .config import DISPLAY_FIELDS, IndexConfig
from .emit import write_gallery
from .sources import CatalogSource

log = logging.getLogger(__name__)


def as_text(value) -> str:
    """Display value as text, kept exactly as the source wrote it."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def text_or(value, default: str) -> str:
    text = as_text(value)
    return text if text.strip() else default


def as_path(value) -> str:
    return as_text(value).strip()


def clean_images(raw) -> list[str]:
    if not isinstance(raw, list):
        return []
    images = []
    for entry in raw:
        path = as_path(entry)
        if path and path not in images:
            images.append(path)
    return images


def normalise_item(record: dict, config: IndexConfig) -> dict:
    """Ensure every item has all front-end fields, in a stable key order."""
    item = {
        "id": as_path(record.get("id")),
        "title": text_or(record.get("title"), config.default_title),
        "category": text_or(record.get("category"), config.default_category),
    }
    for key in DISPLAY_FIELDS:
        item[key] = as_text(record.get(key))
    item["thumbnail"] = as_path(record.get("thumbnail"))
    item["images"] = clean_images(record.get("images"))
    item["modelUrl"] = as_path(record.get("modelUrl"))
    item["textureResolution"] = text_or(record.get("textureResolution"), config.texture_resolution)

    formats = record.get("formats")
    if isinstance(formats, list) and formats:
        item["formats"] = [as_path(f) for f in formats if as_path(f)]
    else:
        item["formats"] = list(config.formats)

    # Anything else from the metadata passes straight through.
    for key, value in record.items():
        if key not in item:
            item[key] = value
    return item


def build_index(source: CatalogSource, config: IndexConfig) -> list[dict]:
    items = []
    seen = set()
    for record in source.collect():
        item_id = as_path(record.get("id"))
        if not item_id:
            log.warning("Dropping record without an id: %r", record.get("title", "?"))
            continue
        if item_id in seen:
            log.warning("Duplicate id %r, keeping the first entry", item_id)
            continue
        seen.add(item_id)
        items.append(normalise_item(record, config))
    return items


def build_and_write(source: CatalogSource, config: IndexConfig) -> list[dict]:
    """Build the index and publish it. Nothing is written if the source is missing."""
    items = build_index(source, config)
    write_gallery(items, config.output_path)
    return items
