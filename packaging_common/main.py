"""CLI entry point for packaging-common."""

import sys
from pathlib import Path

import click
import structlog

from packaging_common.cli.feed import feed_group, nerf_dart_command
from packaging_common.cli.npmrc import npmrc_group
from packaging_common.cli.token import token_group
from packaging_common.config.settings import PackagingSettings
from packaging_common.exceptions import ConfigurationError
from packaging_common.host.environment_host import EnvironmentTaskHost
from packaging_common.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option("--config", default=None, help="Path to a YAML settings file")
@click.option("--log-level", default=None, help="Logging level (defaults to the configured level)")
@click.option("--json-logs/--console-logs", default=True, help="Render logs as JSON lines")
@click.option(
    "--logging-commands",
    is_flag=True,
    envvar="PACKAGING_LOGGING_COMMANDS",
    help="Also emit ##vso logging commands for warnings and errors",
)
@click.pass_context
def cli(ctx: click.Context, config: str | None, log_level: str | None, json_logs: bool, logging_commands: bool) -> None:
    """packaging-common: token resolution and .npmrc backup for publish tasks."""
    try:
        settings = PackagingSettings.from_yaml(config) if config else PackagingSettings()
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)

    configure_logging(log_level or settings.log_level, json_output=json_logs)
    log.debug("settings_loaded", config=str(Path(config)) if config else None)

    ctx.obj = {
        "settings": settings,
        "host": EnvironmentTaskHost(emit_logging_commands=logging_commands),
    }


cli.add_command(token_group)
cli.add_command(npmrc_group)
cli.add_command(feed_group)
cli.add_command(nerf_dart_command)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
