"""Settings shared by every stage of the gallery index pipeline."""

from dataclasses import dataclass, field
from pathlib import Path

MODELS_DIR = "assets/models"
OUTPUT = "assets/gallery.json"
CSV_FILE = "products_data.csv"
METADATA_NAME = "info.json"

IMAGE_EXTS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
MODEL_EXTS = frozenset({".glb", ".gltf"})

IMAGE_COLUMNS = ("image1", "image2", "image3", "image4", "image5")
COLUMNS = (
    "id",
    "title",
    "description",
    "category",
    "vertices",
    "polyCount",
    "marketplaceLink",
    "thumbnail",
) + IMAGE_COLUMNS

# Display fields every emitted item carries, in output order.
DISPLAY_FIELDS = ("description", "vertices", "polyCount", "marketplaceLink")


@dataclass(frozen=True)
class IndexConfig:
    root: Path = field(default_factory=Path)
    models_dir: str = MODELS_DIR
    output: str = OUTPUT
    csv_file: str = CSV_FILE
    metadata_name: str = METADATA_NAME
    image_exts: frozenset = IMAGE_EXTS
    model_exts: frozenset = MODEL_EXTS
    thumbnail_prefix: str = "thumbnail."
    asset_prefix: str = "assets/"
    url_prefix: str = "http"
    default_title: str = "Untitled"
    default_category: str = "Uncategorized"
    texture_resolution: str = "4K"
    formats: tuple = ("GLB", "FBX", "OBJ")
    columns: tuple = COLUMNS
    image_columns: tuple = IMAGE_COLUMNS

    @classmethod
    def from_root(cls, root: str | Path = ".") -> "IndexConfig":
        return cls(root=Path(root).resolve())

    @property
    def models_path(self) -> Path:
        return self.root / self.models_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    @property
    def csv_path(self) -> Path:
        return self.root / self.csv_file

    def item_dir(self, item_id: str) -> Path:
        """Managed asset folder for one catalog item."""
        return self.models_path / item_id

    def site_path(self, rel: str) -> Path:
        """Filesystem location of a site-relative path."""
        return self.root / rel

    def site_relative(self, *parts: str) -> str:
        """Join parts under the models directory as a site-relative string."""
        joined = "/".join(p.strip("/") for p in parts if p)
        return f"{self.models_dir.rstrip('/')}/{joined}"

    def is_image(self, path: Path) -> bool:
        return path.suffix.lower() in self.image_exts

    def is_model(self, path: Path) -> bool:
        return path.suffix.lower() in self.model_exts
