"""
dlc-store CLI Main Entry Point

Usage:
    dlc-store [--store PATH] [--verbose] <command>
    dlc-store balance
    dlc-store location get|set
    dlc-store address ...
    dlc-store utxo ...
    dlc-store contract ...
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import create_store, get_store_settings
from ..persistence import FileFlatStore
from ..repository import LocalRepository
from ..wallet import WalletService
from .contract_cmds import contract
from .utils import get_repository, run
from .wallet_cmds import address, utxo


@click.group()
@click.version_option(version=__version__, prog_name="dlc-store")
@click.option("--store", "store_path", default=None, help="Path to store JSON file (default: from config)")
@click.option("--verbose", "-v", is_flag=True, help="Log store traffic")
@click.pass_context
def cli(ctx: click.Context, store_path: Optional[str], verbose: bool):
    """dlc-store CLI - inspect and edit a wallet store."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if store_path:
        store = FileFlatStore(Path(store_path))
    else:
        store = create_store(get_store_settings())
    ctx.ensure_object(dict)
    ctx.obj["repository"] = LocalRepository(store)


@cli.command("balance")
@click.pass_context
def balance(ctx: click.Context):
    """Show the spendable balance (unreserved UTXOs)."""
    wallet = WalletService(get_repository(ctx))
    sats = run(wallet.get_balance())
    click.echo(f"{sats} sats ({sats / 100_000_000:.8f} BTC)")


@cli.group()
def location():
    """Saved location commands."""
    pass


@location.command("get")
@click.pass_context
def location_get(ctx: click.Context):
    """Print the saved location."""
    value = run(get_repository(ctx).get_location())
    if value is None:
        click.echo("No location saved.")
        return
    click.echo(value)


@location.command("set")
@click.argument("value")
@click.pass_context
def location_set(ctx: click.Context, value: str):
    """Save a location."""
    run(get_repository(ctx).save_location(value))
    click.echo(f"Saved location: {value}")


# Register collection commands
cli.add_command(address)
cli.add_command(utxo)
cli.add_command(contract)


# Entry point
def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
