"""CLI command running the round-trip self-check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempcast.cli._options import global_options
from tempcast.selfcheck import SAMPLES, run_self_check, verify_self_check

if TYPE_CHECKING:
    from tempcast.cli.main import AppContext


@click.command("check")
@global_options
def check_cmd(app_ctx: AppContext) -> None:
    """Round-trip the sample temperatures through every other scale.

    Exits with status 1 if any round trip drifts by EPSILON or more.
    """
    formatter = app_ctx.formatter
    report = run_self_check(SAMPLES)

    if formatter.format == "json":
        # A failed run emits only the error envelope.
        verify_self_check(report)
        formatter.output({"samples": list(SAMPLES), "report": report}, command="check")
        return

    formatter.output(report, command="check")
    verify_self_check(report)
