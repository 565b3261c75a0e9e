"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the CommandRunner. The config file is read by each command, not by the
group, so ``--help`` works without one.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
import yaml
from dotenv import load_dotenv

from EsQueryDsl.cli.runner import CommandRunner
from EsQueryDsl.config import AppConfig, load_config
from EsQueryDsl.utils.log import configure_logging, log


@click.group(help="EsQueryDsl: render Elasticsearch query bodies from YAML.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    ``ESQUERYDSL_CONFIG`` (from the environment or a ``.env`` file) replaces
    the default config path when ``--config`` is not given.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()
    if ctx.get_parameter_source("config_path") is click.core.ParameterSource.DEFAULT:
        config_path = Path(os.environ.get("ESQUERYDSL_CONFIG", str(config_path)))
    ctx.obj = config_path


def _load_app_config(ctx: click.Context) -> AppConfig:
    """Load the config path stored by the group.

    Raises:
        click.Abort: When the file is missing, unreadable, or invalid.
    """
    config_path: Path = ctx.obj
    try:
        return load_config(config_path)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        configure_logging()
        log.error("Config load failed (%s): %s", config_path, e)
        raise click.Abort from e


@cli.command("body")
@click.pass_context
def body_cmd(ctx: click.Context) -> None:
    """Print one compact search body per configured query."""
    CommandRunner(_load_app_config(ctx)).run(action=ctx.command.name)


@cli.command("msearch")
@click.pass_context
def msearch_cmd(ctx: click.Context) -> None:
    """Print all configured queries as a multi-search NDJSON batch."""
    CommandRunner(_load_app_config(ctx)).run(action=ctx.command.name)


@cli.command("render")
@click.pass_context
def render_cmd(ctx: click.Context) -> None:
    """Render using ``output.format`` from the config."""
    CommandRunner(_load_app_config(ctx)).run(action=ctx.command.name)
