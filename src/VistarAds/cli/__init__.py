"""CLI package for VistarAds command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from VistarAds.cli.runner import CommandRunner
from VistarAds.cli.ui import cli


def main() -> None:
    """Run VistarAds CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
