"""Command-line entry points for the gallery index tools.

  build-gallery-index      assets/models/<id>/info.json  -> assets/gallery.json
  build-gallery-from-csv   products_data.csv             -> assets/gallery.json
  verify-gallery-assets    check gallery.json references exist on disk
  migrate-gallery-to-csv   assets/models/<id>/info.json  -> products_data.csv

Every command runs from the site root (or --root) and exits 1 when a
required source is missing.
"""

import argparse
import logging

from .builder import build_and_write
from .config import IndexConfig
from .errors import PortfolioIndexError
from .logging_config import setup_logging
from .migrate import migrate_to_csv
from .paths import PathResolver
from .sources import FolderSource, TabularSource
from .verify import verify_gallery

log = logging.getLogger("portfolio_index")


def make_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--root", default=".", help="Site root directory")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def run_build(source, config: IndexConfig) -> int:
    try:
        items = build_and_write(source, config)
    except PortfolioIndexError as e:
        log.error("Error: %s", e)
        return 1
    log.info("Successfully generated %s with %d items.", config.output, len(items))
    return 0


def build_gallery_index(argv=None) -> int:
    parser = make_parser("Build gallery.json from per-model folders in assets/models/")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    config = IndexConfig.from_root(args.root)
    return run_build(FolderSource(config), config)


def build_gallery_from_csv(argv=None) -> int:
    parser = make_parser("Build gallery.json from products_data.csv")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    config = IndexConfig.from_root(args.root)
    return run_build(TabularSource(config, PathResolver(config)), config)


def verify_gallery_assets(argv=None) -> int:
    parser = make_parser("Check that every gallery.json thumbnail exists on disk")
    parser.add_argument("--images", action="store_true", help="Also check every gallery image")
    parser.add_argument("--decode", action="store_true", help="Open each file to confirm it is a readable image")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    config = IndexConfig.from_root(args.root)
    try:
        report = verify_gallery(config, check_images=args.images, decode=args.decode)
    except PortfolioIndexError as e:
        log.error("Error: %s", e)
        return 1

    log.info(
        "%d reference(s) checked: %d ok, %d missing, %d corrupt",
        report.checked,
        report.ok,
        len(report.missing),
        len(report.corrupt),
    )
    return 0 if report.passed else 1


def migrate_gallery_to_csv(argv=None) -> int:
    parser = make_parser("Write products_data.csv from the assets/models/ folders")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing CSV file")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    config = IndexConfig.from_root(args.root)
    if config.csv_path.exists() and not args.force:
        log.error("Error: %s already exists (use --force to overwrite)", config.csv_path)
        return 1
    try:
        count = migrate_to_csv(config)
    except PortfolioIndexError as e:
        log.error("Error: %s", e)
        return 1
    log.info("Successfully created %s with %d entries.", config.csv_file, count)
    return 0
