"""Command-line front end for inspecting and editing the chat configuration.

All commands print JSON. Credentials are always shown masked.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final, cast

import typer

from chatconf.di.container import Container
from chatconf.errors import ConfigSaveError
from chatconf.service import ErrorResponse
from chatconf.settings.models import CamelModel, UserConfig

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Chat API configuration CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "chatconf.cli"

# Global options
CONFIG_DIR_OPTION = typer.Option(
    None, "--config-dir", help="Directory holding config.json (env: CHATCONF_CONFIG_DIR)"
)
SYSTEM_SETTINGS_OPTION = typer.Option(
    None,
    "--system-settings",
    dir_okay=False,
    help="System settings file to read (env: CHATCONF_SYSTEM_SETTINGS)",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")

# Options for save / test
USE_SYSTEM_DEFAULTS_OPTION = typer.Option(
    False,
    "--use-system-defaults/--custom",
    help="Defer to the system settings instead of a custom configuration",
)
API_KEY_OPTION = typer.Option(None, "--api-key", help="API key (prompted if omitted)")
BASE_URL_OPTION = typer.Option(None, "--base-url", help="API endpoint")
MODEL_OPTION = typer.Option(None, "--model", help="Model identifier")


def _container(ctx: typer.Context) -> Container:
    return cast(Container, ctx.obj)


def _echo_payload(model: CamelModel) -> None:
    typer.echo(json.dumps(model.to_payload(), indent=2))


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = CONFIG_DIR_OPTION,
    system_settings: Path | None = SYSTEM_SETTINGS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Inspect and edit the API configuration used by the chat client."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    ctx.obj = Container.from_env(config_dir, system_settings)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the configuration currently in effect."""
    _echo_payload(_container(ctx).service.fetch_effective_config())


@app.command()
def user(ctx: typer.Context) -> None:
    """Show the saved user configuration."""
    response = _container(ctx).service.fetch_user_config()
    if isinstance(response, ErrorResponse):
        raise _fail(response.error)
    _echo_payload(response)


@app.command()
def system(ctx: typer.Context) -> None:
    """Summarize the system settings (the credential is never shown)."""
    response = _container(ctx).service.fetch_system_config_summary()
    if isinstance(response, ErrorResponse):
        raise _fail(response.error)
    _echo_payload(response)


@app.command()
def save(
    ctx: typer.Context,
    use_system_defaults: bool = USE_SYSTEM_DEFAULTS_OPTION,
    api_key: str | None = API_KEY_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    model: str | None = MODEL_OPTION,
) -> None:
    """Save the user configuration."""
    if not use_system_defaults and api_key is None:
        api_key = typer.prompt("API key", hide_input=True)

    config = UserConfig(
        use_system_defaults=use_system_defaults,
        api_key=api_key,
        base_url=base_url,
        model=model,
    )
    response = _container(ctx).service.save_user_config(config)
    if isinstance(response, ErrorResponse):
        raise _fail(response.error)
    _echo_payload(response)


@app.command("test")
def check_config(
    ctx: typer.Context,
    api_key: str | None = typer.Option(None, "--api-key", help="API key to check"),
    base_url: str | None = BASE_URL_OPTION,
    model: str | None = MODEL_OPTION,
) -> None:
    """Check a candidate configuration without saving it."""
    response = _container(ctx).service.test_config(
        {"apiKey": api_key, "baseUrl": base_url, "model": model}
    )
    _echo_payload(response)
    if not response.success:
        raise typer.Exit(code=1)


@app.command()
def reset(ctx: typer.Context) -> None:
    """Delete the user configuration and fall back to system defaults."""
    store = _container(ctx).store
    try:
        removed = store.clear()
    except ConfigSaveError as exc:
        raise _fail(str(exc)) from exc

    if removed:
        typer.secho(f"Removed {store.path}", fg=typer.colors.GREEN)
    else:
        typer.echo(f"No user config at {store.path}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
