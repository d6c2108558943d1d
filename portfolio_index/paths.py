"""Resolve asset references from source records to site-relative paths.

Resolution is split in two phases. ``PathResolver.resolve`` only inspects the
reference (and asks ``exists`` about candidate files) and returns a plan;
``PathResolver.import_file`` carries out the one side effect, copying an
external file into the item's managed folder.

Order, first match wins:

  1. blank                      -> unresolvable
  2. starts with "http"          -> URL, passed through verbatim
  3. absolute filesystem path    -> import into assets/models/<id>/ if it
                                    exists, otherwise unresolvable
  4. relative path               -> "assets/..." kept as-is, else
                                    assets/models/<input> or
                                    assets/models/<id>/<input>, whichever exists
  5. nothing on disk             -> assets/models/<input> as a best guess
"""

import filecmp
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Callable, Optional

from .config import IndexConfig

log = logging.getLogger(__name__)

URL = "url"
IMPORT = "import"
LOCAL = "local"
GUESS = "guess"


@dataclass(frozen=True)
class Resolution:
    kind: str
    path: str
    source: Optional[Path] = None
    destination: Optional[Path] = None

    @property
    def needs_import(self) -> bool:
        return self.kind == IMPORT


def is_absolute(raw: str) -> bool:
    return PurePosixPath(raw).is_absolute() or PureWindowsPath(raw).is_absolute()


def normalise_relative(raw: str) -> str:
    rel = raw.replace("\\", "/")
    while rel.startswith("./"):
        rel = rel[2:]
    return rel.lstrip("/")


class PathResolver:
    def __init__(self, config: IndexConfig, exists: Callable[[Path], bool] = os.path.exists):
        self.config = config
        self.exists = exists

    def resolve(self, raw: str, item_id: str) -> Optional[Resolution]:
        """Plan where a reference points. Returns None when unresolvable."""
        ref = (raw or "").strip()
        if not ref:
            return None

        if ref.lower().startswith(self.config.url_prefix):
            return Resolution(URL, ref)

        if is_absolute(ref):
            source = Path(ref)
            if not self.exists(source):
                log.warning("%s: file not found, skipping %s", item_id, ref)
                return None
            name = PureWindowsPath(ref).name if "\\" in ref else source.name
            return Resolution(
                IMPORT,
                self.config.site_relative(item_id, name),
                source=source,
                destination=self.config.item_dir(item_id) / name,
            )

        rel = normalise_relative(ref)
        if not rel:
            return None
        if rel.startswith(self.config.asset_prefix):
            return Resolution(LOCAL, rel)

        for candidate in (self.config.site_relative(rel), self.config.site_relative(item_id, rel)):
            if self.exists(self.config.site_path(candidate)):
                return Resolution(LOCAL, candidate)

        guess = self.config.site_relative(rel)
        log.debug("%s: %s not found on disk, using %s", item_id, ref, guess)
        return Resolution(GUESS, guess)

    def import_file(self, resolution: Resolution) -> bool:
        """Copy a planned import into place. Returns True if a copy was made.

        Safe to repeat: an identical destination is left untouched.
        """
        if not resolution.needs_import:
            return False
        source, destination = resolution.source, resolution.destination
        destination.parent.mkdir(parents=True, exist_ok=True)
        if destination.exists():
            if os.path.samefile(source, destination):
                return False
            if filecmp.cmp(source, destination, shallow=False):
                log.debug("Up to date: %s", resolution.path)
                return False
        shutil.copy2(source, destination)
        log.info("Imported %s -> %s", source, resolution.path)
        return True

    def resolve_and_import(
        self, raw: str, item_id: str, claimed: Optional[dict[Path, Path]] = None
    ) -> Optional[str]:
        """Resolve a reference and perform any import; returns the site path.

        ``claimed`` maps import destinations to the source that took them.
        A different source aiming at a taken destination is skipped.
        """
        resolution = self.resolve(raw, item_id)
        if resolution is None:
            return None
        if resolution.needs_import and claimed is not None:
            owner = claimed.setdefault(resolution.destination, resolution.source)
            if owner != resolution.source:
                log.warning(
                    "%s: %s would overwrite %s (imported from %s), skipping",
                    item_id,
                    resolution.source,
                    resolution.path,
                    owner,
                )
                return None
        if resolution.needs_import:
            try:
                self.import_file(resolution)
            except OSError as e:
                log.warning("%s: could not import %s: %s", item_id, resolution.source, e)
                return None
        return resolution.path
