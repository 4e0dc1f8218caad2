"""CLI for running and exercising the NGL relay"""
import asyncio
import json
import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import get_settings
from .device import generate_device_id
from .relay import RelayHandler
from .results import RelaySuccess, to_body

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
def cli():
    """NGL Relay - anonymous message relay"""
    pass


@cli.command()
@click.option('--host', default=None, help='Bind address (defaults to RELAY_HOST)')
@click.option('--port', type=int, default=None, help='Bind port (defaults to RELAY_PORT)')
def serve(host: Optional[str], port: Optional[int]):
    """Run the relay HTTP server"""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    logger.info(f"Relay settings: {settings.as_dict}")
    click.echo(f"Starting NGL Relay on {host}:{port}")
    uvicorn.run("ngl_relay.app:app", host=host, port=port, log_level=settings.log_level.lower())


@cli.command()
@click.option('--url', required=True, help='NGL profile link or bare handle')
@click.option('--message', required=True, help='Message to deliver')
def send(url: str, message: str):
    """Relay a single message"""
    handler = RelayHandler(get_settings())
    result = asyncio.run(handler.handle(url, message))

    click.echo(json.dumps(to_body(result), indent=2))
    if isinstance(result, RelaySuccess):
        click.echo(f"✓ Delivered to {result.username}")
    else:
        click.echo(f"✗ {result.message} (HTTP {result.http_status})", err=True)
        sys.exit(1)


@cli.command(name="device-id")
def device_id():
    """Print a freshly generated device identifier"""
    click.echo(generate_device_id())


if __name__ == '__main__':
    cli()
