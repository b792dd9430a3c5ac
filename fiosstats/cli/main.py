"""Fios gateway stats CLI."""
import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..client import GatewayClient
from ..core.api import APIConfig, DEFAULT_HOST
from ..core.exceptions import GatewayError
from ..core.logging import configure_logging
from ..core.models import NetworkSample

app = typer.Typer(
    name="fios-stats",
    help="Fetch network statistics from a Fios Quantum gateway",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger('fiosstats.cli')


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


async def run_collection(
    password: str,
    influx_uri: Optional[str] = None,
    config: Optional[APIConfig] = None
) -> NetworkSample:
    """
    Log in, read the counters, optionally push them, log out.

    Logout is attempted whenever the counters were fetched. If the push
    already failed, a logout failure is only logged so the push error is
    the one reported.
    """
    async with GatewayClient(config=config) as gateway:
        await gateway.login(password)
        sample = await gateway.get_network_sample()
        console.print(f"Data: {sample}")

        if influx_uri:
            try:
                await gateway.push_metrics(influx_uri, sample)
            except GatewayError:
                try:
                    await gateway.logout()
                except GatewayError as e:
                    logger.warning(f"Logout failed: {e}")
                raise

        await gateway.logout()
        return sample


@app.command()
def main(
    password: str = typer.Option(..., "--password", "-p", help="Password for router"),
    influxdb: Optional[str] = typer.Option(
        None, "--influxdb", "-i", metavar="URI",
        help="URI to InfluxDB including databasename"
    ),
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Gateway host name"),
):
    """Fetch the gateway's network counters and optionally store them in InfluxDB."""
    configure_logging()

    try:
        run_async(run_collection(password, influxdb, APIConfig.for_host(host)))
    except GatewayError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        if e.cause is not None:
            err_console.print(f"[red]Caused by: {escape(repr(e.cause))}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
