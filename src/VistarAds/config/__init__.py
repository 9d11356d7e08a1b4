from __future__ import annotations

"""Public configuration API for VistarAds."""

from VistarAds.config.ad import AdConfig, parse_ad_config
from VistarAds.config.app import (
    AppConfig,
    apply_env_overrides,
    flatten_params,
    load_config,
    load_parameters,
    load_params,
    load_params_with_defaults,
    parse_params,
)
from VistarAds.config.common import parse_array, parse_bool, parse_float, parse_int, parse_str
from VistarAds.config.runtime import RuntimeConfig

__all__ = [
    "AdConfig",
    "AppConfig",
    "RuntimeConfig",
    "parse_ad_config",
    "parse_params",
    "load_config",
    "load_parameters",
    "load_params",
    "load_params_with_defaults",
    "apply_env_overrides",
    "flatten_params",
    "parse_array",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_str",
]
