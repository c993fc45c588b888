"""Observability helpers: structured logging."""

from __future__ import annotations

from villagerdb.observability.logging import ServiceNameFilter, configure_logging

__all__ = [
    "ServiceNameFilter",
    "configure_logging",
]
