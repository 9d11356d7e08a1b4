"""Output renderers for ad requests."""

from __future__ import annotations

from VistarAds.renderers.json import (
    JsonFileWriter,
    load_ad_request,
    read_ad_request,
    render_ad_config,
    render_ad_request,
)

__all__ = [
    "JsonFileWriter",
    "load_ad_request",
    "read_ad_request",
    "render_ad_config",
    "render_ad_request",
]
