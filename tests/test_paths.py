from __future__ import annotations

import logging
from pathlib import Path

import pytest

from portfolio_index.config import IndexConfig
from portfolio_index.paths import GUESS, IMPORT, LOCAL, URL, PathResolver, normalise_relative

SITE = Path("/site")


def resolver_with(*existing: str) -> PathResolver:
    known = {Path(p) for p in existing}
    return PathResolver(IndexConfig(root=SITE), exists=lambda p: Path(p) in known)


def test_blank_reference_is_unresolvable() -> None:
    resolver = resolver_with()
    assert resolver.resolve("", "lamp") is None
    assert resolver.resolve("   ", "lamp") is None


def test_url_passes_through_without_filesystem_check() -> None:
    def exists(_path):
        raise AssertionError("URLs must not touch the filesystem")

    resolver = PathResolver(IndexConfig(root=SITE), exists=exists)
    res = resolver.resolve("https://cdn.example.com/Lamp.JPG", "lamp")
    assert res.kind == URL
    assert res.path == "https://cdn.example.com/Lamp.JPG"


def test_existing_absolute_path_plans_an_import() -> None:
    res = resolver_with("/abs/path/lamp.jpg").resolve("/abs/path/lamp.jpg", "lamp")
    assert res.kind == IMPORT
    assert res.path == "assets/models/lamp/lamp.jpg"
    assert res.source == Path("/abs/path/lamp.jpg")
    assert res.destination == SITE / "assets/models/lamp/lamp.jpg"


def test_missing_absolute_path_is_unresolvable(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert resolver_with().resolve("/abs/path/gone.jpg", "lamp") is None
    assert "gone.jpg" in caplog.text


def test_asset_prefixed_path_is_kept_as_is() -> None:
    res = resolver_with().resolve("assets/shared/studio.png", "lamp")
    assert (res.kind, res.path) == (LOCAL, "assets/shared/studio.png")


def test_relative_to_models_root_wins_over_item_folder() -> None:
    resolver = resolver_with(
        "/site/assets/models/lamp/side.png",
        "/site/assets/models/lamp/lamp/side.png",
    )
    res = resolver.resolve("lamp/side.png", "lamp")
    assert (res.kind, res.path) == (LOCAL, "assets/models/lamp/side.png")


def test_bare_filename_found_in_item_folder() -> None:
    res = resolver_with("/site/assets/models/lamp/side.png").resolve("side.png", "lamp")
    assert (res.kind, res.path) == (LOCAL, "assets/models/lamp/side.png")


def test_unplaced_relative_path_falls_back_to_a_guess() -> None:
    res = resolver_with().resolve("lamp/later.png", "lamp")
    assert (res.kind, res.path) == (GUESS, "assets/models/lamp/later.png")


def test_windows_separators_and_dot_prefix_are_normalised() -> None:
    res = resolver_with("/site/assets/models/lamp/side.png").resolve(".\\lamp\\side.png", "lamp")
    assert res.path == "assets/models/lamp/side.png"
    assert normalise_relative("./././a/b") == "a/b"


def test_import_file_copies_once(config: IndexConfig, tmp_path: Path) -> None:
    source = tmp_path / "outside" / "lamp.jpg"
    source.parent.mkdir()
    source.write_bytes(b"jpeg-bytes")
    resolver = PathResolver(config)

    res = resolver.resolve(str(source), "lamp")
    assert resolver.import_file(res) is True
    assert (config.models_path / "lamp" / "lamp.jpg").read_bytes() == b"jpeg-bytes"

    assert resolver.import_file(res) is False

    source.write_bytes(b"new-jpeg-bytes")
    assert resolver.import_file(res) is True
    assert (config.models_path / "lamp" / "lamp.jpg").read_bytes() == b"new-jpeg-bytes"


def test_import_of_file_already_in_place_is_a_no_op(config: IndexConfig) -> None:
    target = config.models_path / "lamp" / "lamp.jpg"
    target.parent.mkdir(parents=True)
    target.write_bytes(b"jpeg-bytes")
    resolver = PathResolver(config)

    assert resolver.resolve_and_import(str(target), "lamp") == "assets/models/lamp/lamp.jpg"
    assert target.read_bytes() == b"jpeg-bytes"


def test_non_import_resolutions_never_copy(config: IndexConfig) -> None:
    resolver = PathResolver(config)
    assert resolver.import_file(resolver.resolve("https://example.com/a.png", "lamp")) is False
