"""Configuration helpers for source layout and runtime settings."""

from .settings import default_data_dir, default_page_limit
from .sources import (
    DOMAIN_ORDER,
    Domain,
    SourceSpec,
    format_from_label,
    get_sources,
    iter_sources,
)

__all__ = [
    "DOMAIN_ORDER",
    "Domain",
    "SourceSpec",
    "default_data_dir",
    "default_page_limit",
    "format_from_label",
    "get_sources",
    "iter_sources",
]
