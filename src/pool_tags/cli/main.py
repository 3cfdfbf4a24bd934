"""
Pool Tags CLI - fetch Balancer V2 pool contract tags for a network
"""
import asyncio
import json
import sys

import aiohttp
import click
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_settings
from ..errors import PoolTagsError
from ..log_setup import setup_logging
from ..pipelines.contract_tags import return_tags
from ..registry import SUBGRAPH_URLS, supported_networks

console = Console()


def fail(error):
    console.print(f"[red]Error: {escape(str(error) or type(error).__name__)}[/red]", soft_wrap=True)
    sys.exit(1)


def render_table(network_id, tags):
    table = Table(title=f"Balancer pools on eip155:{network_id}")
    table.add_column("Contract Address", style="cyan", no_wrap=True)
    table.add_column("Public Name Tag", style="green", no_wrap=True)
    table.add_column("Public Note", style="dim")
    for tag in tags:
        table.add_row(tag.contract_address, tag.public_name_tag, tag.public_note)
    console.print(table)


@click.group()
@click.option('--config', '-c', help='Path to configuration file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config, debug):
    """Pool Tags - contract tags for Balancer V2 pools"""
    ctx.ensure_object(dict)
    try:
        settings = load_settings(config)
    except PoolTagsError as e:
        fail(e)
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings.log_level)
    ctx.obj['settings'] = settings


@cli.command()
def networks():
    """List supported network ids and their subgraph endpoints"""
    table = Table(title="Supported networks")
    table.add_column("Network ID", style="cyan")
    table.add_column("Subgraph", style="white")
    for network_id in supported_networks():
        table.add_row(network_id, SUBGRAPH_URLS[network_id])
    console.print(table)


@cli.command()
@click.argument('network_id')
@click.option('--api-key', default=None, help='Decentralized network API key (not supported)')
@click.option('--format', 'fmt', type=click.Choice(['json', 'table']), default='json', help='Output format')
@click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True), help='Write JSON to this file')
@click.pass_context
def fetch(ctx, network_id, api_key, fmt, output):
    """Fetch contract tags for every pool on NETWORK_ID"""
    settings = ctx.obj['settings']
    try:
        tags = asyncio.run(return_tags(network_id, api_key, timeout=settings.http_timeout))
    except (PoolTagsError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Fetching tags for network {network_id} failed: {e!r}")
        fail(e)

    if fmt == 'table':
        render_table(network_id, tags)
        return
    text = json.dumps([t.as_record() for t in tags], indent=2)
    if output:
        with open(output, "w") as f:
            f.write(text + "\n")
        console.print(f"[green]Wrote {len(tags)} tags to {output}[/green]")
    else:
        click.echo(text)


def main():
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
