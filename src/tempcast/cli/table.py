"""CLI command listing the supported conversions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempcast.cli._options import global_options
from tempcast.conversion import CONVERSION_TABLE

if TYPE_CHECKING:
    from tempcast.cli.main import AppContext


@click.command("table")
@global_options
def table_cmd(app_ctx: AppContext) -> None:
    """Show the six direct conversion formulas."""
    app_ctx.formatter.output(list(CONVERSION_TABLE.values()), command="table")
