"""Entity image lookup on the public filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from villagerdb.config import Settings
from villagerdb.constants import (
    IMAGE_EXTENSIONS,
    VARIATION_SEPARATOR,
    EntityType,
    ImageSize,
    entity_directory,
    image_not_found_url,
    tag_value,
)
from villagerdb.services.assets import StaticAssetResolver
from villagerdb.utils.assets import create_file_hash, public_path

logger = logging.getLogger(__name__)


class EntityImageData(BaseModel):
    """Thumb, medium and full URLs for one entity image."""

    model_config = ConfigDict(frozen=True)

    thumb: str
    medium: str
    full: str

    @classmethod
    def placeholder(cls) -> EntityImageData:
        return cls(
            thumb=image_not_found_url(ImageSize.THUMB),
            medium=image_not_found_url(ImageSize.MEDIUM),
            full=image_not_found_url(ImageSize.FULL),
        )

    def as_dict(self) -> dict[str, str]:
        return self.model_dump()


def image_id_for(entity_id: object, variation_id: object | None = None) -> str:
    image_id = tag_value(entity_id)
    # 0 is a real variation id here, unlike a plain truthiness check
    if variation_id is not None and variation_id != "":
        image_id += VARIATION_SEPARATOR + tag_value(variation_id)
    return image_id


def _coerce_size(image_type: ImageSize | str) -> ImageSize | None:
    try:
        return ImageSize(image_type)
    except ValueError:
        return None


class ImageResolver:
    """Resolve entity image URLs and cache-bust them with the full image hash."""

    def __init__(self, assets: StaticAssetResolver):
        self.assets = assets

    @classmethod
    def from_settings(cls, settings: Settings) -> ImageResolver:
        return cls(StaticAssetResolver.from_settings(settings))

    @property
    def public_dir(self) -> Path:
        return self.assets.public_dir

    def get_image_url(
        self,
        entity_type: EntityType | str,
        image_type: ImageSize | str,
        entity_id: object,
        variation_id: object | None = None,
    ) -> str | None:
        """Return the requested rendition URL, or None when no image exists.

        Existence is always checked against the full image; thumb and medium
        are generated from it. Extensions are tried in PNG, JPG, JPEG order.
        Unknown size tags resolve to None rather than raising.
        """
        size = _coerce_size(image_type)
        if size is None:
            logger.debug("Unknown image size %r requested", image_type)
            return None

        directory = entity_directory(entity_type)
        image_id = image_id_for(entity_id, variation_id)
        full_dir = self.public_dir / "images" / directory / ImageSize.FULL.value
        for extension in IMAGE_EXTENSIONS:
            if (full_dir / f"{image_id}.{extension}").exists():
                return f"/images/{directory}/{size.value}/{image_id}.{extension}"

        logger.debug("No %s image on disk for %s", directory, image_id)
        return None

    def get_entity_image_data(
        self,
        entity_type: EntityType | str,
        entity_id: object,
        variation_id: object | None = None,
        use_placeholder: bool = True,
    ) -> EntityImageData | None:
        """Return thumb, medium and full URLs for an entity.

        Missing images map to the placeholder set, or None when
        ``use_placeholder`` is False. All three URLs carry the full image hash.
        """
        full_url = self.get_image_url(
            entity_type, ImageSize.FULL, entity_id, variation_id
        )
        if full_url is None:
            return EntityImageData.placeholder() if use_placeholder else None

        file_hash = create_file_hash(public_path(self.public_dir, full_url))
        urls = {
            size.value: self.assets.compute_static_asset_url(
                self.get_image_url(entity_type, size, entity_id, variation_id),
                file_hash,
            )
            for size in ImageSize
        }
        if None in urls.values():
            # Image vanished between probes
            return EntityImageData.placeholder() if use_placeholder else None
        return EntityImageData(**urls)
