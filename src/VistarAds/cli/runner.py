"""Command runner for coordinating CLI execution.

Builds the ad request and hands the rendered JSON to stdout or a file writer.
Logging is already configured by the CLI group.
"""

from __future__ import annotations

from pathlib import Path

import click

from VistarAds.config import AppConfig
from VistarAds.core.models import AdRequest
from VistarAds.renderers.json import JsonFileWriter, dumps, read_ad_request, render_ad_config, render_ad_request
from VistarAds.utils.log import log


class CommandRunner:
    """Run CLI commands against a loaded ``AppConfig``."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_request(self, action: str, request_path: Path | None, output_dir: str | None) -> None:
        """Build one ad request and emit it as JSON.

        Args:
            action: The CLI command name.
            request_path: Optional JSON file with a partially filled request.
            output_dir: Write to ``<output_dir>/json`` instead of stdout.

        Raises:
            click.Abort: When the request cannot be built or written.
        """
        try:
            req = read_ad_request(request_path) if request_path else AdRequest()
            self.config.ad.update_ad_request(req)
            log.info(
                "Built ad request venue=%s display_areas=%d",
                req.venue_id,
                len(req.display_areas),
            )
            self._emit(render_ad_request(req), action, output_dir)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Request failed: %s", e)
            raise click.Abort from e

    def run_show_config(self, action: str) -> None:
        """Print the endpoint and base request."""
        self._emit(render_ad_config(self.config.ad), action, None)

    def _emit(self, payload: dict, action: str, output_dir: str | None) -> None:
        if output_dir:
            JsonFileWriter(output_dir).write(payload, action)
        else:
            click.echo(dumps(payload))
