from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console

    from tempcast.conversion.table import ConversionRule
    from tempcast.selfcheck.models import SelfCheckReport


def _fmt(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".")


class RichOutput:
    """Rich-based terminal output helpers for *tempcast*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Self-check report
    # ------------------------------------------------------------------

    def self_check_report(self, report: SelfCheckReport) -> None:
        """Print one row per round trip followed by an overall verdict."""
        table = Table(title="Round-trip self-check")
        table.add_column("Round trip", style="cyan")
        table.add_column("Expected", justify="right")
        table.add_column("Via", justify="right")
        table.add_column("Actual", justify="right")
        table.add_column("|Delta|", justify="right")
        table.add_column("Result")

        for r in report.results:
            verdict = "[green]pass[/green]" if r.passed else "[red]FAIL[/red]"
            table.add_row(
                r.label,
                _fmt(r.expected),
                _fmt(r.intermediate),
                _fmt(r.actual),
                f"{r.delta:.3g}",
                verdict,
            )

        self._con.print(table)

        passed = len(report.results) - len(report.failures)
        summary = f"{passed}/{len(report.results)} round trips within ±{report.epsilon}"
        if report.ok:
            self._con.print(Panel(f"[green]{summary}[/green]", expand=False))
        else:
            self._con.print(Panel(f"[red]{summary}[/red]", expand=False))

    # ------------------------------------------------------------------
    # Conversion table
    # ------------------------------------------------------------------

    def conversion_table(self, rules: Iterable[ConversionRule]) -> None:
        """Print the supported conversions with their formulas."""
        table = Table(title="Conversions")
        table.add_column("From", style="bold")
        table.add_column("To", style="bold")
        table.add_column("Formula")

        for rule in rules:
            table.add_row(
                f"{rule.source.value} ({rule.source.symbol})",
                f"{rule.target.value} ({rule.target.symbol})",
                rule.formula,
            )

        self._con.print(table)

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)
