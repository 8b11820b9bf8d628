"""Main CLI entry point for appfolders.

Prints the directories an application would use:
- appfolders show APPNAME [--author A] [--version V]
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from appfolders.paths import AppIdentity
from appfolders.utils.errors import AppFoldersError
from appfolders.utils.platform import Environment

console = Console()

# Representative OS strings for simulated platforms
PLATFORM_SYSTEMS = {
    "windows": "win32",
    "mac": "darwin",
    "unix": "linux",
}


def get_environment(platform: Optional[str]) -> Environment:
    """
    Get the environment to resolve directories against.

    Args:
        platform: Platform family to simulate, or None for the running process

    Returns:
        Environment: Host environment, or a simulated one sharing its variables
    """
    if platform is None:
        return Environment.current()
    return Environment(system=PLATFORM_SYSTEMS[platform])


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx, verbose: bool):
    """appfolders - standard application directories for this platform."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.argument("appname")
@click.option("--author", "-a", default=None, help="Application author (used on Windows)")
@click.option("--version", "version", default=None, help="Version segment to append")
@click.option("--roaming", is_flag=True, help="Use the roaming data folder on Windows")
@click.option("--no-opinion", is_flag=True, help="Do not append 'Cache' on Windows")
@click.option(
    "--platform",
    type=click.Choice(sorted(PLATFORM_SYSTEMS)),
    default=None,
    help="Simulate another platform",
)
def show(
    appname: str,
    author: Optional[str],
    version: Optional[str],
    roaming: bool,
    no_opinion: bool,
    platform: Optional[str],
):
    """
    Show the directories for an application.

    APPNAME: Application name
    """
    env = get_environment(platform)

    try:
        identity = AppIdentity(appname, author, version)
        rows = [
            ("user_cache_dir", identity.user_cache_dir(opinion=not no_opinion, env=env)),
            ("user_data_dir", identity.user_data_dir(roaming=roaming, env=env)),
            ("site_data_dir", identity.site_data_dir(env=env)),
        ]
    except AppFoldersError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    table = Table(title=f"Directories for {appname} ({env.platform.value})")
    table.add_column("Kind", style="cyan")
    table.add_column("Path", style="green", overflow="fold")

    for kind, path in rows:
        table.add_row(kind, path)

    console.print(table)


if __name__ == "__main__":
    cli()
