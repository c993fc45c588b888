"""Entity and image size tags shared by the URL helpers."""

from __future__ import annotations

from enum import Enum


class EntityType(str, Enum):
    """Kind of catalog object that owns images."""

    ITEM = "item"
    VILLAGER = "villager"


class ImageSize(str, Enum):
    """Image rendition. Thumb and medium are generated from full."""

    THUMB = "thumb"
    MEDIUM = "medium"
    FULL = "full"


# Flat aliases for template and caller code that passes plain tags around
THUMB = ImageSize.THUMB.value
MEDIUM = ImageSize.MEDIUM.value
FULL = ImageSize.FULL.value
ITEM = EntityType.ITEM.value
VILLAGER = EntityType.VILLAGER.value

# Length of hash key in filenames
HASH_LENGTH = 7

# Probe order matters: first match wins
IMAGE_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg")

VARIATION_SEPARATOR = "-vv-"


def tag_value(tag: Enum | str | int) -> str:
    """Return the plain string form of an enum member or raw tag."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return str(tag)


def entity_directory(entity_type: EntityType | str) -> str:
    """Image directory for an entity type, e.g. ``items``."""
    return f"{tag_value(entity_type)}s"


def image_not_found_url(size: ImageSize | str) -> str:
    """Path of the placeholder shown when an entity has no image."""
    return f"/images/image-not-available-{tag_value(size)}.svg"
