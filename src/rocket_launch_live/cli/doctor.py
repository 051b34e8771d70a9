"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from rocket_launch_live.adapters.api_client import RocketLaunchLive
from rocket_launch_live.core.config import AppSettings, get_user_env_file, write_user_env_vars
from rocket_launch_live.core.domain.params import TagParamsBuilder
from rocket_launch_live.core.errors import RocketLaunchLiveError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(client: RocketLaunchLive) -> tuple[bool, str]:
    """Cheapest authenticated call: one page of tags."""

    try:
        response = await client.tags(TagParamsBuilder().page(1).build())
    except RocketLaunchLiveError as exc:
        return False, exc.detail
    if not response.valid_auth:
        return False, "Server reports the API key as invalid"
    return True, f"{len(response.result)} tag(s) on page 1"


@app.command()
def check() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="RocketLaunch.Live Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    if not settings.api_key:
        table.add_row("API key", "FAIL", "Set RLL_API_KEY or run `rll doctor setup`")
        table.add_row("API access", "SKIPPED", "No API key")
        _console.print(table)
        raise typer.Exit(code=1)

    table.add_row("API key", "OK", f"...{settings.api_key[-4:]}")
    client = RocketLaunchLive(settings=settings)
    ok_api, detail_api = asyncio.run(_check_api(client))
    table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores the API key in the user config .env)."""

    settings = AppSettings()
    api_key = typer.prompt("RocketLaunch.Live API key", default="", show_default=False, hide_input=True).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()

    env_path = write_user_env_vars({"RLL_API_KEY": api_key, "RLL_BASE_URL": base_url or None})
    _console.print(f"[green]Saved configuration to:[/green] {env_path}")
