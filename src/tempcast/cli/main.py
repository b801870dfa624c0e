"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click

from tempcast._internal.log import setup_logging
from tempcast.errors import ScaleMismatchError, ToleranceViolationError, UnsupportedConversionError
from tempcast.models.config import AppSettings
from tempcast.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Scale-checked temperature quantities.

    Without a subcommand, runs the round-trip self-check.
    """
    settings = AppSettings()
    verbose = verbose or settings.verbose
    setup_logging(verbose=verbose)

    ctx.obj = AppContext(
        output_format=output_format or settings.output_format,
        quiet=quiet,
        verbose=verbose,
    )

    if ctx.invoked_subcommand is None:
        from tempcast.cli.check import check_cmd

        ctx.invoke(check_cmd)


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempcast.cli.check import check_cmd
    from tempcast.cli.table import table_cmd

    cli.add_command(check_cmd)
    cli.add_command(table_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    args = sys.argv[1:] if argv is None else list(argv)
    ctx: click.Context | None = None
    try:
        ctx = cli.make_context("tempcast", args)
        with ctx:
            cli.invoke(ctx)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = ctx.obj if ctx is not None and isinstance(ctx.obj, AppContext) else None
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = _get_command_name(ctx)

        if _handle_known_error(exc, formatter, cmd_name):
            raise SystemExit(1) from exc

        logger.debug("Unhandled error in %s", cmd_name, exc_info=exc)
        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _get_command_name(ctx: click.Context | None) -> str:
    """Name of the subcommand that ran; a bare invocation runs ``check``."""
    if ctx is None or ctx.invoked_subcommand is None:
        return "check"
    return ctx.invoked_subcommand


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was handled and the caller should exit.
    """
    if isinstance(exc, ToleranceViolationError):
        _handle_tolerance_violation(exc, formatter, cmd_name)
        return True
    if isinstance(exc, UnsupportedConversionError):
        formatter.output_error(
            code="unsupported_conversion",
            message=str(exc),
            command=cmd_name,
            source=exc.source.value,
            target=exc.target.value,
        )
        return True
    if isinstance(exc, ScaleMismatchError):
        formatter.output_error(
            code="scale_mismatch",
            message=str(exc),
            command=cmd_name,
            left=exc.left.value,
            right=exc.right.value,
        )
        return True
    return False


def _handle_tolerance_violation(
    exc: ToleranceViolationError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Report the failing round trip with expected vs actual values."""
    if formatter.format == "json":
        formatter.output_error(
            code="tolerance_violation",
            message=str(exc),
            command=cmd_name,
            source=exc.source.value,
            via=exc.via.value,
            expected=exc.expected,
            actual=exc.actual,
        )
        return

    formatter.rich.error("Round-trip conversion exceeded tolerance.")
    formatter.rich.info(f"  Scales:   {exc.source.value} -> {exc.via.value} -> {exc.source.value}")
    formatter.rich.info(f"  Expected: {exc.expected}")
    formatter.rich.info(f"  Actual:   {exc.actual}")
