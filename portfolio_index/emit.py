import json
import os
import tempfile
from pathlib import Path


def render_gallery(items: list[dict]) -> str:
    return json.dumps(items, indent=2, ensure_ascii=False) + "\n"


def atomic_write(path: Path, data: str, encoding: str = "utf-8") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.")
    try:
        with open(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(data)
        # mkstemp creates the file 0600
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def write_gallery(items: list[dict], path: Path) -> None:
    """Replace the published gallery file in a single write."""
    atomic_write(path, render_gallery(items))
