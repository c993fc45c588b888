"""Test fixtures: a throwaway public/ tree and resolvers pointed at it."""

from __future__ import annotations

from pathlib import Path

import pytest

from villagerdb.cache import StaticUrlCache
from villagerdb.services.assets import StaticAssetResolver
from villagerdb.services.images import ImageResolver
from villagerdb.urls import reset_default_resolver


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def static_cache() -> StaticUrlCache:
    return StaticUrlCache()


@pytest.fixture
def assets(public_dir: Path, static_cache: StaticUrlCache) -> StaticAssetResolver:
    return StaticAssetResolver(public_dir, cache=static_cache)


@pytest.fixture
def images(assets: StaticAssetResolver) -> ImageResolver:
    return ImageResolver(assets)


@pytest.fixture
def default_resolver(images: ImageResolver):
    """Route the module-level helpers through the temp public/ tree."""
    reset_default_resolver(images)
    yield images
    reset_default_resolver()


@pytest.fixture
def make_image(public_dir: Path):
    """Write a full-size image the way the upload pipeline lays them out."""

    def _make(entity_dir: str, name: str, content: bytes = b"\x89PNG") -> Path:
        path = public_dir / "images" / entity_dir / "full" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def make_asset(public_dir: Path):
    """Write a static file under public/ and return its site URL."""

    def _make(url: str, content: str = "body { color: red; }") -> str:
        path = public_dir / url.lstrip("/")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return url

    return _make
