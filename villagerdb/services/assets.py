from __future__ import annotations

import logging
from pathlib import Path

from villagerdb.cache import StaticUrlCache
from villagerdb.config import Settings
from villagerdb.utils.assets import add_hash_to_url, create_file_hash, public_path

logger = logging.getLogger(__name__)


class StaticAssetResolver:
    """Cache-busted URLs for files served from the public directory."""

    def __init__(self, public_dir: Path, cache: StaticUrlCache | None = None):
        self.public_dir = public_dir
        self.cache = cache if cache is not None else StaticUrlCache()

    @classmethod
    def from_settings(
        cls, settings: Settings, cache: StaticUrlCache | None = None
    ) -> StaticAssetResolver:
        return cls(settings.resolved_public_dir, cache=cache)

    def file_hash(self, url: str) -> str | None:
        return create_file_hash(public_path(self.public_dir, url))

    def compute_static_asset_url(
        self, input_url: object, computed_hash: str | None = None
    ) -> str | None:
        """Compute a CDN-friendly URL for ``input_url``. Not cached.

        Non-string input yields None without touching the filesystem. When the
        file cannot be hashed the URL comes back unchanged.
        """
        if not isinstance(input_url, str):
            return None

        file_hash = computed_hash or self.file_hash(input_url)
        if file_hash:
            return add_hash_to_url(input_url, file_hash)

        logger.debug("No hash for %s, serving it without cache busting", input_url)
        return input_url

    def get_cache_busted_url(self, input_url: object) -> str | None:
        """Cached variant of :meth:`compute_static_asset_url` for CSS and JS.

        Images should be precomputed elsewhere; this cache never forgets.
        """
        if not isinstance(input_url, str):
            return None
        return self.cache.get_or_compute(input_url, self.compute_static_asset_url)
