#!/usr/bin/env python3
"""Auto-build gallery.json from model folders in assets/models/.

Each subfolder is one catalog item; its name is the item id. Metadata comes
from an info.json inside the folder. Folders without one are skipped.

info.json example  (assets/models/chair01/info.json):
{
  "title": "Chair",
  "category": "Furniture",
  "description": "Low-poly dining chair.",
  "vertices": "1,204",
  "polyCount": "2.3k",
  "marketplaceLink": "https://example.com/chair01"
}

Every .jpg/.jpeg/.png/.webp in the folder goes in the image strip. The
thumbnail is thumbnail.* if present, otherwise the first image. A .glb or
.gltf file in the folder becomes the item's modelUrl.

Usage:  python scripts/build-gallery-index.py [--root .]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from portfolio_index.cli import build_gallery_index  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(build_gallery_index())
