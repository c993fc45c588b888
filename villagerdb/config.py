"""Application settings for asset URL resolution."""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration entrypoint for the asset helpers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "INFO"

    # Static files; None means "<cwd>/public" at resolver construction time
    public_dir: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("PUBLIC_DIR", "STATIC_ROOT"),
    )

    # CDN host prepended by template helpers; empty = local-only
    media_cdn_domain: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str:
        """Accept lower-case or padded level names from the environment."""
        if not value:
            return "INFO"
        return str(value).strip().upper()

    @field_validator("media_cdn_domain", mode="before")
    @classmethod
    def strip_cdn_domain(cls, value: str | None) -> str:
        if not value:
            return ""
        raw = str(value).strip()
        for scheme in ("https://", "http://"):
            if raw.startswith(scheme):
                raw = raw[len(scheme) :]
        return raw.rstrip("/")

    @property
    def resolved_public_dir(self) -> Path:
        """Return the absolute public root the resolvers read from."""
        if self.public_dir is not None:
            return self.public_dir.resolve()
        return Path.cwd() / "public"


settings = Settings()
