#!/usr/bin/env python3
"""Auto-build gallery.json from the products_data.csv spreadsheet.

Header:
  id,title,description,category,vertices,polyCount,marketplaceLink,
  thumbnail,image1,image2,image3,image4,image5

Rows without an id are skipped. thumbnail and image1..image5 accept:
  * URLs (kept as-is)
  * paths under assets/ (kept as-is)
  * paths relative to assets/models/ or to assets/models/<id>/
  * absolute paths anywhere on disk, copied into assets/models/<id>/

Usage:  python scripts/build-gallery-from-csv.py [--root .]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from portfolio_index.cli import build_gallery_from_csv  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(build_gallery_from_csv())
