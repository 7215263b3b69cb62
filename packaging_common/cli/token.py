"""CLI commands for access token resolution.

Commands:
    - resolve: Resolve the token a publish step would use (masked by default)

Example:
    Resolve the token for an internal NuGet feed::

        $ INPUT_FEEDPUBLISH=MyProject/MyFeed packaging-common token resolve \\
              --feed-type internal --endpoint-input externalEndpoint \\
              --feed-input feedPublish --tool nuget
"""

import sys

import click

from packaging_common.credentials import AccessTokenResolver
from packaging_common.enums import PackageToolType
from packaging_common.exceptions import CredentialError


def mask(value: str) -> str:
    """Mask all but the first and last four characters of ``value``."""
    if len(value) > 8:
        return value[:4] + "*" * (len(value) - 8) + value[-4:]
    return "*" * len(value)


@click.group(name="token")
def token_group():
    """Resolve access tokens for package feeds."""
    pass


@token_group.command(name="resolve")
@click.option("--feed-type", default="internal", show_default=True, help="Feed type input value")
@click.option("--endpoint-input", required=True, help="Task input naming the service connection")
@click.option("--feed-input", required=True, help="Task input holding the 'project/feed' value")
@click.option(
    "--tool",
    type=click.Choice(["nuget", "dotnetcorecli", "universal", "npm"], case_sensitive=False),
    required=True,
    help="Package tool that publishes",
)
@click.option("--show-value", is_flag=True, help="Show full token (default: masked)")
@click.pass_context
def resolve_token(
    ctx: click.Context, feed_type: str, endpoint_input: str, feed_input: str, tool: str, show_value: bool
):
    """Resolve the token a publish step would authenticate with."""
    resolver = AccessTokenResolver(ctx.obj["host"], ctx.obj["settings"])
    try:
        token = resolver.resolve(feed_type, endpoint_input, feed_input, PackageToolType(tool))
    except CredentialError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        if e.suggestion:
            click.echo(click.style(f"Suggestion: {e.suggestion}", fg="yellow"), err=True)
        sys.exit(1)

    if not token:
        click.echo(click.style("No access token available", fg="yellow"), err=True)
        sys.exit(1)

    if show_value:
        click.echo(f"Value: {token}")
    else:
        click.echo(f"Value: {mask(token)}")
        click.echo(click.style("Use --show-value to display the full token", fg="yellow"))
