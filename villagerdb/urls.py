"""Module-level URL helpers used by page rendering code.

These wrap a lazily built default :class:`ImageResolver` configured from
``villagerdb.config.settings``. Code that needs a different public root or its
own static URL cache should construct resolvers directly instead.
"""

from __future__ import annotations

import threading

from villagerdb.config import settings
from villagerdb.constants import (
    FULL,
    ITEM,
    MEDIUM,
    THUMB,
    VILLAGER,
    EntityType,
    ImageSize,
    tag_value,
)
from villagerdb.services.images import EntityImageData, ImageResolver

_default_resolver: ImageResolver | None = None
_default_lock = threading.Lock()


def get_default_resolver() -> ImageResolver:
    global _default_resolver
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = ImageResolver.from_settings(settings)
        return _default_resolver


def reset_default_resolver(resolver: ImageResolver | None = None) -> None:
    """Swap the default resolver; None rebuilds it from settings on next use."""
    global _default_resolver
    with _default_lock:
        _default_resolver = resolver


def get_entity_url(entity_type: EntityType | str, entity_id: object) -> str:
    return f"/{tag_value(entity_type)}/{tag_value(entity_id)}"


def get_image_url(
    entity_type: EntityType | str,
    image_type: ImageSize | str,
    entity_id: object,
    variation_id: object | None = None,
) -> str | None:
    return get_default_resolver().get_image_url(
        entity_type, image_type, entity_id, variation_id
    )


def get_entity_image_data(
    entity_type: EntityType | str,
    entity_id: object,
    variation_id: object | None = None,
    use_placeholder: bool = True,
) -> EntityImageData | None:
    return get_default_resolver().get_entity_image_data(
        entity_type, entity_id, variation_id, use_placeholder
    )


def compute_static_asset_url(
    input_url: object, computed_hash: str | None = None
) -> str | None:
    return get_default_resolver().assets.compute_static_asset_url(
        input_url, computed_hash
    )


def get_cache_busted_url(input_url: object) -> str | None:
    return get_default_resolver().assets.get_cache_busted_url(input_url)


__all__ = [
    "FULL",
    "ITEM",
    "MEDIUM",
    "THUMB",
    "VILLAGER",
    "compute_static_asset_url",
    "get_cache_busted_url",
    "get_default_resolver",
    "get_entity_image_data",
    "get_entity_url",
    "get_image_url",
    "reset_default_resolver",
]
