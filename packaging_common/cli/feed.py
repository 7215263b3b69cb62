"""CLI helpers for feed values and registry URLs."""

import click

from packaging_common.credentials.feeds import resolve_feed_identity
from packaging_common.utils.urls import to_nerf_dart


@click.group(name="feed")
def feed_group():
    """Inspect feed values."""
    pass


@feed_group.command(name="parse")
@click.argument("value")
def parse_feed(value: str):
    """Split a 'project/feed' VALUE into project and feed."""
    feed = resolve_feed_identity(value)
    click.echo(f"Project: {feed.project_id or '-'}")
    click.echo(f"Feed: {feed.feed_id or '-'}")


@click.command(name="nerf-dart")
@click.argument("uri")
def nerf_dart_command(uri: str):
    """Print the .npmrc credential key for registry URI."""
    click.echo(to_nerf_dart(uri))
