from pathlib import Path


class PortfolioIndexError(Exception):
    """Base class for errors that abort a pipeline run."""


class SourceNotFoundError(PortfolioIndexError):
    """A required top-level source (models directory, CSV file) is missing."""

    def __init__(self, path: Path, what: str = "source"):
        super().__init__(f"{what} not found: {path}")
        self.path = path
        self.what = what


class GalleryFormatError(PortfolioIndexError):
    """The published gallery file is missing or not a JSON array."""


class SourceReadError(PortfolioIndexError):
    """A required top-level source exists but cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
