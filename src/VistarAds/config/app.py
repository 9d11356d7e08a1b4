from __future__ import annotations

"""Application config orchestration and YAML parameter loading."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from VistarAds.config.ad import AdConfig, parse_ad_config
from VistarAds.config.runtime import RuntimeConfig, load_runtime

ENV_PREFIX = "VISTAR_"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    ad: AdConfig


def parse_params(params: Mapping[str, str]) -> AppConfig:
    """Parse a flat parameter map into AppConfig."""
    return AppConfig(runtime=load_runtime(params), ad=parse_ad_config(params))


def load_config(
    config_path: Path | None = None,
    default_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load parameters from YAML files and the environment and parse them."""
    return parse_params(load_parameters(config_path, default_path, environ))


def load_parameters(
    config_path: Path | None = None,
    default_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the flat parameter map from YAML files plus ``VISTAR_*`` variables."""
    params = load_params_with_defaults(config_path, default_path)
    return apply_env_overrides(params, os.environ if environ is None else environ)


def load_params(path: Path) -> dict[str, str]:
    """Load one YAML file as a flat parameter map."""
    return flatten_params(parse_yaml(path.read_text(encoding="utf-8")))


def load_params_with_defaults(
    config_path: Path | None, default_path: Path | None = None
) -> dict[str, str]:
    """Load parameters by merging an optional override onto optional defaults.

    Args:
        config_path: Override YAML file, or None.
        default_path: Defaults YAML file, or None.

    Returns:
        Flat parameter map; empty when neither file is given.

    Raises:
        OSError: If a given file cannot be read.
        ValueError: If a file's root is not a mapping.
    """
    base: dict[str, Any] = {}
    if default_path is not None:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path is not None and config_path != default_path:
        override = parse_yaml(config_path.read_text(encoding="utf-8"))
        base = merge_config_dicts(base, override)
    return flatten_params(base)


def apply_env_overrides(params: Mapping[str, str], environ: Mapping[str, str]) -> dict[str, str]:
    """Overlay ``VISTAR_<NAME>`` environment variables as ``vistar.<name>``."""
    merged = dict(params)
    for name, value in environ.items():
        if name.startswith(ENV_PREFIX) and len(name) > len(ENV_PREFIX):
            merged["vistar." + name[len(ENV_PREFIX):].lower()] = value
    return merged


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def flatten_params(raw: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted string keys and string values.

    ``{"vistar": {"width": 100}}`` becomes ``{"vistar.width": "100"}``.
    Booleans render as ``true``/``false``, lists are comma-joined and ``None``
    values are dropped.
    """
    out: dict[str, str] = {}
    for key, value in raw.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            out.update(flatten_params(value, prefix=f"{name}."))
        elif value is None:
            continue
        elif isinstance(value, bool):
            out[name] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            out[name] = ",".join(_scalar_str(item) for item in value)
        else:
            out[name] = _scalar_str(value)
    return out


def _scalar_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
