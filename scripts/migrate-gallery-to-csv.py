#!/usr/bin/env python3
"""Write products_data.csv from the existing assets/models/<id>/ folders.

One-off helper for moving a folder-based catalog to the spreadsheet
workflow. Refuses to overwrite an existing CSV unless --force is given.

Usage:  python scripts/migrate-gallery-to-csv.py [--force]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from portfolio_index.cli import migrate_gallery_to_csv  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(migrate_gallery_to_csv())
