#!/usr/bin/env python3
"""Check every thumbnail referenced by assets/gallery.json exists on disk.

Usage:
    python scripts/verify-gallery-assets.py            # thumbnails only
    python scripts/verify-gallery-assets.py --images   # full image strips too
    python scripts/verify-gallery-assets.py --decode   # also open each file with Pillow
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from portfolio_index.cli import verify_gallery_assets  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(verify_gallery_assets())
