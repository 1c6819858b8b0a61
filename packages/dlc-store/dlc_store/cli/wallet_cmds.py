"""
dlc-store Wallet CLI - addresses and UTXOs.

Commands:
    dlc-store address list                 - list stored addresses
    dlc-store address add <addr> <privkey> - store an address and its key
    dlc-store address remove <addr>        - forget an address
    dlc-store utxo list [--json-out]       - list stored UTXOs
    dlc-store utxo unreserve <txid> <vout> - clear an output's reserved flag
"""
from __future__ import annotations

import json

import click

from .utils import get_repository, run


@click.group("address")
def address():
    """Address commands."""
    pass


@address.command("list")
@click.pass_context
def address_list(ctx: click.Context):
    """List stored addresses."""
    addresses = run(get_repository(ctx).get_addresses())
    if not addresses:
        click.echo("No addresses stored.")
        return
    for addr in addresses:
        click.echo(addr)


@address.command("add")
@click.argument("addr")
@click.argument("privkey")
@click.pass_context
def address_add(ctx: click.Context, addr: str, privkey: str):
    """Store ADDR with its private key."""
    run(get_repository(ctx).upsert_address(addr, privkey))
    click.echo(f"Stored {addr}")


@address.command("remove")
@click.argument("addr")
@click.pass_context
def address_remove(ctx: click.Context, addr: str):
    """Forget ADDR."""
    run(get_repository(ctx).delete_address(addr))
    click.echo(f"Removed {addr}")


@click.group("utxo")
def utxo():
    """UTXO commands."""
    pass


@utxo.command("list")
@click.option("--json-out", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def utxo_list(ctx: click.Context, json_output: bool):
    """List stored UTXOs."""
    utxos = run(get_repository(ctx).get_utxos())

    if json_output:
        click.echo(json.dumps([u.model_dump(by_alias=True) for u in utxos], indent=2))
        return

    if not utxos:
        click.echo("No UTXOs stored.")
        return

    click.echo(f"{'OUTPOINT':<70} {'AMOUNT':>12} {'RESERVED'}")
    click.echo("-" * 92)
    for u in utxos:
        outpoint = f"{u.txid}:{u.vout}"
        click.echo(f"{outpoint:<70} {u.amount:>12} {'yes' if u.reserved else 'no'}")
    click.echo(f"\n{len(utxos)} utxo(s)")


@utxo.command("unreserve")
@click.argument("txid")
@click.argument("vout", type=int)
@click.pass_context
def utxo_unreserve(ctx: click.Context, txid: str, vout: int):
    """Clear the reserved flag of TXID:VOUT."""
    run(get_repository(ctx).unreserve_utxo(txid, vout))
    click.echo(f"Unreserved {txid}:{vout}")
