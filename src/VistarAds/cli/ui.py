"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from dotenv import load_dotenv

from VistarAds.cli.runner import CommandRunner
from VistarAds.config import AppConfig, load_parameters, parse_ad_config
from VistarAds.config.runtime import load_runtime
from VistarAds.utils.log import configure_logging

DEFAULT_PARAMS_PATH = Path("config/default.yml")


@click.group(help="VistarAds: build Vistar ad requests from player parameters.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML parameter file.",
)
@click.option(
    "--defaults",
    "default_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help=f"Path to YAML defaults merged under --config [default: {DEFAULT_PARAMS_PATH} if present].",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, default_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from a .env file, so ``VISTAR_*`` overrides
    can live there. Logging is configured from ``log.*`` before the ad config
    is parsed so that parse warnings are shown.

    Args:
        ctx: Click context.
        config_path: Path to YAML parameter file.
        default_path: Path to YAML defaults file.
    """
    load_dotenv()
    if default_path is None and DEFAULT_PARAMS_PATH.is_file():
        default_path = DEFAULT_PARAMS_PATH

    # console only until log.* is known
    configure_logging(log_to_file=False)
    try:
        params = load_parameters(config_path, default_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Failed to load config: {e}") from e

    runtime = load_runtime(params)
    configure_logging(
        level=runtime.level,
        action=ctx.invoked_subcommand,
        log_to_file=runtime.to_file,
        log_dir=runtime.dir,
    )
    ctx.obj = AppConfig(runtime=runtime, ad=parse_ad_config(params))


@cli.command("request")
@click.option(
    "--request",
    "request_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="JSON file with a partially filled ad request to merge into.",
)
@click.option(
    "--output-dir",
    default=None,
    help="Write JSON under <output-dir>/json instead of stdout.",
)
@click.pass_context
def request_cmd(ctx: click.Context, request_path: Path | None, output_dir: str | None) -> None:
    """Build an ad request and print it as JSON."""
    CommandRunner(ctx.obj).run_request(ctx.command.name, request_path, output_dir)


@cli.command("show-config")
@click.pass_context
def show_config_cmd(ctx: click.Context) -> None:
    """Print the parsed endpoint and base request."""
    CommandRunner(ctx.obj).run_show_config(ctx.command.name)
