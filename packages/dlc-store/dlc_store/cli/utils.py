"""Helpers shared by CLI command modules."""
from __future__ import annotations

import asyncio
import sys

import click

from ..errors import RepositoryError
from ..repository import LocalRepository


def run(coro):
    """Run a repository coroutine, turning repository errors into exit status 1."""
    try:
        return asyncio.run(coro)
    except RepositoryError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def get_repository(ctx: click.Context) -> LocalRepository:
    """Return the repository the root command built for this invocation."""
    return ctx.obj["repository"]
