from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from villagerdb.config import Settings, settings
from villagerdb.services.images import ImageResolver
from villagerdb.urls import get_default_resolver, get_entity_url


def cdn_url(path: str, cdn_domain: str) -> str:
    if not cdn_domain:
        return path
    return f"https://{cdn_domain}/{path.lstrip('/')}"


def register_template_globals(
    env: Environment,
    images: ImageResolver,
    cdn_domain: str = "",
) -> Environment:
    """Expose the URL helpers to templates rendered from ``env``."""

    def asset_url(path: str) -> str:
        url = images.assets.get_cache_busted_url(path)
        if url is None:
            return ""
        return cdn_url(url, cdn_domain)

    env.globals["asset_url"] = asset_url
    env.globals["entity_url"] = get_entity_url
    env.globals["entity_images"] = images.get_entity_image_data
    return env


def create_template_environment(
    directory: str | Path,
    images: ImageResolver | None = None,
    app_settings: Settings | None = None,
) -> Environment:
    app_settings = app_settings or settings
    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    return register_template_globals(
        env,
        images or get_default_resolver(),
        cdn_domain=app_settings.media_cdn_domain,
    )
