"""Runtime configuration (logging)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from VistarAds.config.common import parse_bool, parse_str
from VistarAds.utils.log import log

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings."""

    level: str
    to_file: bool
    dir: str


def load_runtime(params: Mapping[str, str]) -> RuntimeConfig:
    """Load runtime settings from ``log.*`` parameters.

    Unknown log levels and a blank directory fall back to ``INFO`` and ``log``.

    Args:
        params: Flat parameter map.

    Returns:
        Parsed runtime configuration.
    """
    level = parse_str(params, "log.level", "INFO").strip().upper()
    if level not in _ALLOWED_LOG_LEVELS:
        log.warning("log.level=%s is not one of %s, using INFO", level, sorted(_ALLOWED_LOG_LEVELS))
        level = "INFO"
    log_dir = parse_str(params, "log.dir", "log").strip() or "log"
    return RuntimeConfig(
        level=level,
        to_file=parse_bool(params, "log.to_file", False),
        dir=log_dir,
    )
