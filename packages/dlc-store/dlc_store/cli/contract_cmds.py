"""
dlc-store Contract CLI - inspect stored contracts.

Commands:
    dlc-store contract list [--state S ...]  - list contracts, optionally by state
    dlc-store contract show <id>             - print one contract as JSON
    dlc-store contract remove <id>           - delete a contract
"""
from __future__ import annotations

import json
from typing import Tuple

import click

from ..models import ContractState, get_id
from ..query import ContractQuery
from .utils import get_repository, run

STATE_CHOICES = [s.value for s in ContractState]


@click.group("contract")
def contract():
    """Contract commands."""
    pass


@contract.command("list")
@click.option(
    "--state", "-s", "states", multiple=True,
    type=click.Choice(STATE_CHOICES), help="Only contracts in this state (repeatable)",
)
@click.option("--json-out", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def contract_list(ctx: click.Context, states: Tuple[str, ...], json_output: bool):
    """List stored contracts."""
    query = ContractQuery(states=[ContractState(s) for s in states]) if states else None
    contracts = run(get_repository(ctx).get_contracts(query))

    if json_output:
        click.echo(json.dumps([c.model_dump(mode="json", by_alias=True) for c in contracts], indent=2))
        return

    if not contracts:
        click.echo("No contracts found.")
        return

    click.echo(f"{'ID':<66} {'STATE':<13} {'COLLATERAL':>12}")
    click.echo("-" * 93)
    for c in contracts:
        click.echo(f"{get_id(c):<66} {c.state.value:<13} {c.total_collateral:>12}")
    click.echo(f"\n{len(contracts)} contract(s)")


@contract.command("show")
@click.argument("contract_id")
@click.pass_context
def contract_show(ctx: click.Context, contract_id: str):
    """Print CONTRACT_ID as JSON."""
    c = run(get_repository(ctx).get_contract(contract_id))
    click.echo(json.dumps(c.model_dump(mode="json", by_alias=True), indent=2))


@contract.command("remove")
@click.argument("contract_id")
@click.pass_context
def contract_remove(ctx: click.Context, contract_id: str):
    """Delete CONTRACT_ID."""
    if not run(get_repository(ctx).delete_contract(contract_id)):
        click.echo(f"Error: no contract {contract_id}", err=True)
        ctx.exit(1)
    click.echo(f"Removed {contract_id}")
