"""CLI commands to save and restore a configuration file around a build step.

Without ``--name`` the copy lives in the agent backup folder; with ``--name``
it is written to ``<directory>/<name>.npmrc``.
"""

import sys
from pathlib import Path

import click

from packaging_common.config_backup import ConfigBackup
from packaging_common.exceptions import ConfigurationError


@click.group(name="npmrc")
def npmrc_group():
    """Save and restore .npmrc files."""
    pass


def _named_options(func):
    func = click.option("--directory", type=click.Path(file_okay=False, path_type=Path), help="Backup directory")(func)
    func = click.option("--name", help="Logical backup name (requires --directory)")(func)
    return func


def _check_named(name: str | None, directory: Path | None) -> None:
    if (name is None) != (directory is None):
        raise click.UsageError("--name and --directory must be given together")


@npmrc_group.command(name="save")
@click.argument("file", type=click.Path(path_type=Path))
@_named_options
@click.pass_context
def save(ctx: click.Context, file: Path, name: str | None, directory: Path | None):
    """Save FILE so it can be restored after the build step."""
    _check_named(name, directory)
    backup = ConfigBackup(ctx.obj["host"], settings=ctx.obj["settings"])
    try:
        if name is not None and directory is not None:
            backup.backup_named(file, name, directory)
        else:
            backup.backup(file)
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)


@npmrc_group.command(name="restore")
@click.argument("file", type=click.Path(path_type=Path))
@_named_options
@click.pass_context
def restore(ctx: click.Context, file: Path, name: str | None, directory: Path | None):
    """Restore FILE from its saved copy, if one exists."""
    _check_named(name, directory)
    backup = ConfigBackup(ctx.obj["host"], settings=ctx.obj["settings"])
    try:
        if name is not None and directory is not None:
            backup.restore_named(file, name, directory)
        else:
            backup.restore(file)
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)
