"""Audit the published gallery.json against the files on disk."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .config import IndexConfig
from .errors import GalleryFormatError

log = logging.getLogger(__name__)


@dataclass
class VerifyReport:
    checked: int = 0
    ok: int = 0
    missing: list[tuple[str, str]] = field(default_factory=list)
    corrupt: list[tuple[str, str]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.missing and not self.corrupt


def load_gallery(path: Path) -> list:
    if not path.is_file():
        raise GalleryFormatError(f"{path} not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        raise GalleryFormatError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, list):
        raise GalleryFormatError(f"{path} should contain a JSON array")
    return data


def is_decodable(path: Path) -> bool:
    try:
        with Image.open(path) as img:
            img.verify()
    except Exception as e:
        log.debug("Could not decode %s: %s", path, e)
        return False
    return True


def item_references(item: dict, check_images: bool) -> list[tuple[str, str]]:
    refs = [("Thumbnail", item.get("thumbnail"))]
    if check_images:
        images = item.get("images")
        if isinstance(images, list):
            refs.extend(("Image", p) for p in images)
    return refs


def verify_gallery(config: IndexConfig, check_images: bool = False, decode: bool = False) -> VerifyReport:
    items = load_gallery(config.output_path)
    log.info("Checking %d items...", len(items))

    report = VerifyReport()
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            log.warning("Entry %d is not an object, skipping", idx)
            continue
        item_id = item.get("id", f"#{idx}")
        for label, ref in item_references(item, check_images):
            if not isinstance(ref, str) or not ref:
                continue
            if ref.lower().startswith(config.url_prefix):
                continue
            report.checked += 1
            path = config.site_path(ref)
            if not path.is_file():
                log.error("[MISSING] %s for %s: %s", label, item_id, ref)
                report.missing.append((item_id, ref))
            elif decode and not is_decodable(path):
                log.error("[CORRUPT] %s for %s: %s", label, item_id, ref)
                report.corrupt.append((item_id, ref))
            else:
                log.info("[OK] %s for %s", label, item_id)
                report.ok += 1
    return report
