"""CLI entry point for the hotaisle command."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from hotaisle import __version__
from hotaisle.api.client import HotAisleClient
from hotaisle.api.exceptions import HotAisleError
from hotaisle.api.models import GetUserResponse
from hotaisle.config import (
    PRETTY_PATH,
    ConfigError,
    ConfigNotFoundError,
    HotAisleConfig,
    load_config,
    resolve_path,
    save_config,
)
from hotaisle.log import configure_logging, get_logger, parse_level

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="hotaisle",
    help="Manage Hot Aisle resources from your terminal.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Config file management.", no_args_is_help=True)
set_app = typer.Typer(help="Set a configuration value.", no_args_is_help=True)
get_app = typer.Typer(help="Get a configuration value.", no_args_is_help=True)

config_app.add_typer(set_app, name="set")
config_app.add_typer(get_app, name="get")
app.add_typer(config_app, name="config")


@dataclass
class CLIState:
    config_path: Path
    config: HotAisleConfig
    client: HotAisleClient


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def fail(error: Exception) -> NoReturn:
    print_error(str(error))
    raise typer.Exit(1)


def setup_logging(level: str) -> None:
    try:
        log_level = parse_level(level)
    except ValueError:
        err_console.print(f"Invalid log level: {escape(level)}")
        log_level = "INFO"
    configure_logging(log_level)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"hotaisle {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: Annotated[
        str,
        typer.Option(
            "--config-file",
            "-c",
            help="Path to the config file",
            envvar="HOTAISLE_CONFIG_FILE",
        ),
    ] = PRETTY_PATH,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
):
    """Manage Hot Aisle resources from your terminal."""
    path = resolve_path(config_file)
    try:
        config = load_config(path)
    except ConfigNotFoundError as e:
        config = e.config
        try:
            save_config(config, path)
        except ConfigError as save_error:
            fail(save_error)
    except ConfigError as e:
        fail(e)

    setup_logging(config.log_level)
    logger.debug(f"Loaded config from {path}")

    ctx.obj = CLIState(
        config_path=path,
        config=config,
        client=HotAisleClient(token=config.api_token, user_agent=f"hotaisle/{__version__}"),
    )


def _state(ctx: typer.Context) -> CLIState:
    return ctx.obj


def _set_value(ctx: typer.Context, field: str, label: str, value: str, secret: bool = False) -> None:
    if not value:
        return
    state = _state(ctx)
    setattr(state.config, field, value)
    try:
        save_config(state.config, state.config_path)
    except ConfigError as e:
        fail(e)
    logger.info(f"Config set {label}={'***' if secret else value}")


# -- config set --


@set_app.command("token")
def set_token(ctx: typer.Context, token: Annotated[str, typer.Argument(help="API token")] = ""):
    """Set the API token."""
    _set_value(ctx, "api_token", "token", token, secret=True)


@set_app.command("log-level")
def set_log_level(
    ctx: typer.Context,
    level: Annotated[str, typer.Argument(help="trace, debug, info, warn or error")] = "",
):
    """Set the log level."""
    _set_value(ctx, "log_level", "log-level", level)


@set_app.command("default-team")
def set_default_team(ctx: typer.Context, team: Annotated[str, typer.Argument(help="Team handle")] = ""):
    """Set the default team."""
    _set_value(ctx, "default_team", "default-team", team)


# -- config get --


@get_app.command("token")
def get_token(ctx: typer.Context):
    """Get the API token."""
    typer.echo(_state(ctx).config.api_token, nl=False)


@get_app.command("log-level")
def get_log_level(ctx: typer.Context):
    """Get the log level."""
    typer.echo(_state(ctx).config.log_level, nl=False)


@get_app.command("default-team")
def get_default_team(ctx: typer.Context):
    """Get the default team."""
    typer.echo(_state(ctx).config.default_team, nl=False)


# -- user --


async def _fetch_user(client: HotAisleClient) -> GetUserResponse | None:
    async with client:
        return await client.user.get()


@app.command("user")
def user(ctx: typer.Context):
    """Show the current user."""
    try:
        result = asyncio.run(_fetch_user(_state(ctx).client))
    except HotAisleError as e:
        fail(e)
    data = result.model_dump(mode="json", by_alias=True) if result is not None else None
    console.print_json(data=data)


def main() -> None:
    """Run the hotaisle CLI."""
    app()
