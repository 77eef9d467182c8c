"""Command line interface for qquotes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
import typer
from loguru import logger

from . import __version__
from .commands import Command, CommandDispatcher, ListQuotes, RemoveQuote, SaveQuote
from .config import DEFAULT_CONFIG_PATH, EffectiveConfig, expand_path, resolve_config
from .config.inspector import check_config, explain_config
from .errors import QuotesError
from .log import configure_logging, reset_logging


@dataclass(slots=True)
class CLIState:
    """Holds shared state between Typer commands."""

    config_path: Path
    verbosity: int = 0
    _config: EffectiveConfig | None = None
    _sink_ids: list[int] = field(default_factory=list)

    def ensure_config(self) -> EffectiveConfig:
        if self._config is None:
            try:
                config = resolve_config(self.config_path, verbosity=self.verbosity)
            except QuotesError as exc:
                typer.echo(f"Error: {exc.message}", err=True)
                _exit(exc.exit_code)
            self._sink_ids = configure_logging(config)
            logger.info("qquotes {} started", __version__)
            if config.config_found:
                logger.trace("Config file loaded from {}", config.config_path)
            else:
                logger.trace("Config file not found at {}; using defaults", config.config_path)
            logger.trace("Data file: {}", config.data_path)
            logger.trace("Log file: {}", config.log_path)
            self._config = config
        return self._config

    def close(self) -> None:
        reset_logging(self._sink_ids)
        self._sink_ids = []


app = typer.Typer(help="Store quotes")
config_app = typer.Typer(help="Validate and document the configuration file")
app.add_typer(config_app, name="config")


def _normalize_format(value: str) -> str:
    return value.lower()


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):  # pragma: no cover - defensive guard
        raise RuntimeError("CLI context is not initialised")
    return state


def _exit(code: int) -> None:
    raise typer.Exit(code)


def _run(ctx: typer.Context, command: Command) -> None:
    config = _get_state(ctx).ensure_config()
    logger.info("Running {}", type(command).__name__)
    outcome = CommandDispatcher(config).dispatch(command)
    if not outcome.ok:
        for line in outcome.lines:
            typer.echo(f"Error: {line}", err=True)
        _exit(outcome.exit_code)
    for line in outcome.lines:
        typer.echo(line)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"qquotes {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        help="Path to the TOML configuration file",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Shows details about the results of running qquotes (repeat for more)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Initialise CLI state shared by every command."""

    state = CLIState(config_path=expand_path(config), verbosity=verbose)
    ctx.obj = state
    ctx.call_on_close(state.close)

    if ctx.invoked_subcommand is None:
        typer.echo("No default action. Please see qquotes --help for more information")
        _exit(0)


@app.command(help="Save a quote")
def save(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help="Quote text; prompted for when omitted"),
    author: str | None = typer.Option(None, "--author", "-a", help="Who said it"),
) -> None:
    if text is None:
        text = typer.prompt("quote")
    _run(ctx, SaveQuote(text=text, author=author))


@app.command(name="list", help="Print all quotes")
def list_quotes(
    ctx: typer.Context,
    long_format: bool = typer.Option(
        False,
        "--long-format",
        "-l",
        help="Display all information such as author and creation time",
    ),
) -> None:
    _run(ctx, ListQuotes(long_format=long_format))


@app.command(help="Remove a quote by ID")
def remove(
    ctx: typer.Context,
    quote_id: int = typer.Argument(..., metavar="QUOTE_ID", help="ID of the quote to remove"),
) -> None:
    _run(ctx, RemoveQuote(quote_id=quote_id))


app.command(name="add", hidden=True)(save)
app.command(name="delete", hidden=True)(remove)


@config_app.command(help="Validate the configuration file")
def check(
    ctx: typer.Context,
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for validation results",
        callback=_normalize_format,
    ),
) -> None:
    state = _get_state(ctx)
    result, exit_code, _ = check_config(state.config_path)

    if format == "json":
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False, default=str))
        _exit(exit_code)

    if result["status"] == "ok":
        typer.echo(f"Configuration OK: {result['config_path']}")
        for warning in result["warnings"]:
            typer.echo(f"Warning: {warning}")
    else:
        error: dict[str, Any] = result["error"]
        typer.echo(
            f"Configuration error ({error['type']}) for {result['config_path']}: {error['message']}",
            err=True,
        )
        for detail in error.get("details", []):
            location = detail["loc"] or "<root>"
            typer.echo(f"  - {location}: {detail['message']} ({detail['type']})", err=True)

    _exit(exit_code)


@config_app.command(help="Describe recognised configuration keys")
def explain(
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for configuration schema",
        callback=_normalize_format,
    ),
) -> None:
    fields = explain_config()

    if format == "json":
        typer.echo(json.dumps({"fields": fields}, indent=2, ensure_ascii=False, default=str))
        return

    typer.echo(f"Configuration keys ({len(fields)}):")
    for entry in fields:
        default_repr = "None" if entry["default"] is None else str(entry["default"])
        description = entry["description"] or "(no description)"
        typer.echo(f"  {entry['name']} ({entry['type']}, default={default_repr}): {description}")


@config_app.command(help="Show the effective paths after merging defaults")
def show(ctx: typer.Context) -> None:
    config = _get_state(ctx).ensure_config()
    source = "found" if config.config_found else "not found, using defaults"
    typer.echo(f"config file: {config.config_path} ({source})")
    typer.echo(f"data file:   {config.data_path}")
    typer.echo(f"log file:    {config.log_path}")


def main(argv: list[str] | None = None) -> int:
    """Entry point compatible with setuptools console scripts."""

    try:
        result = app(args=argv, prog_name="qquotes", standalone_mode=False)
    except typer.Exit as exc:  # pragma: no cover - Typer translates exit codes
        return exc.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    if isinstance(result, int):
        return result
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
