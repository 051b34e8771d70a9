"""`rll` command line interface.

One command per API endpoint. Filters map to the endpoint's parameter
builder; results are printed as a Rich table, or as JSON with `--json`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from rocket_launch_live.adapters.api_client import RocketLaunchLive
from rocket_launch_live.adapters.json_exporter import dump_response_json, export_response_json
from rocket_launch_live.cli import doctor
from rocket_launch_live.cli.ui_components import (
    build_companies_table,
    build_launches_table,
    build_locations_table,
    build_missions_table,
    build_pads_table,
    build_summary_text,
    build_tags_table,
    build_vehicles_table,
)
from rocket_launch_live.core.config import AppSettings
from rocket_launch_live.core.domain.models import Response
from rocket_launch_live.core.domain.params import (
    CompanyParamsBuilder,
    Direction,
    LaunchParamsBuilder,
    LocationParamsBuilder,
    MissionParamsBuilder,
    PadParamsBuilder,
    ParamsBuilder,
    TagParamsBuilder,
    VehicleParamsBuilder,
)
from rocket_launch_live.core.errors import RocketLaunchLiveError
from rocket_launch_live.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="Query the RocketLaunch.Live API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_JSON_OPTION = typer.Option(False, "--json", help="Print the raw response envelope as JSON.")
_OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Also write the response envelope to a JSON file.")
_PAGE_OPTION = typer.Option(None, "--page", help="Result page (1-based).")
_ID_OPTION = typer.Option(None, "--id", help="Record id.")


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except RocketLaunchLiveError as exc:
        _err_console.print(f"[red]Error:[/red] {exc.detail}")
        raise typer.Exit(code=1) from exc


def _apply(builder: ParamsBuilder, **values: Any) -> ParamsBuilder:
    """Call the builder setter named after each option that was given."""

    for name, value in values.items():
        if value is not None:
            getattr(builder, name)(value)
    return builder


def _fetch(call: Callable[[RocketLaunchLive], Awaitable[Response]]) -> Response:
    client = RocketLaunchLive(settings=AppSettings())
    return asyncio.run(call(client))


def _emit(response: Response, table: Table, *, as_json: bool, output: Path | None) -> None:
    if output is not None:
        path = export_response_json(response=response, output_path=output)
        _err_console.print(f"[green]Saved response to:[/green] {path}")
    if as_json:
        typer.echo(dump_response_json(response), nl=False)
        return
    _console.print(table)
    _console.print(build_summary_text(response))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests (DEBUG)."),
) -> None:
    configure_logging("DEBUG" if verbose else AppSettings().log_level)


@app.command()
def launches(
    id_: int | None = _ID_OPTION,
    cospar_id: str | None = typer.Option(None, "--cospar-id", help="COSPAR international designator."),
    after_date: str | None = typer.Option(None, "--after", help="Launches on or after YYYY-MM-DD."),
    before_date: str | None = typer.Option(None, "--before", help="Launches on or before YYYY-MM-DD."),
    modified_since: str | None = typer.Option(
        None, "--modified-since", help="Launches modified since an ISO 8601 timestamp."
    ),
    location_id: int | None = typer.Option(None, "--location-id"),
    pad_id: int | None = typer.Option(None, "--pad-id"),
    provider_id: int | None = typer.Option(None, "--provider-id"),
    tag_id: int | None = typer.Option(None, "--tag-id"),
    vehicle_id: int | None = typer.Option(None, "--vehicle-id"),
    state_abbr: str | None = typer.Option(None, "--state", help="US state abbreviation."),
    country_code: str | None = typer.Option(None, "--country", help="ISO 3166 country code."),
    search: str | None = typer.Option(None, "--search", help="Free-text search."),
    slug: str | None = typer.Option(None, "--slug"),
    limit: int | None = typer.Option(None, "--limit", help="Maximum number of launches."),
    direction: Direction | None = typer.Option(None, "--direction", case_sensitive=False),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launches."""

    with _handle_errors():
        params = _apply(
            LaunchParamsBuilder(),
            id=id_,
            cospar_id=cospar_id,
            after_date=after_date,
            before_date=before_date,
            modified_since=modified_since,
            location_id=location_id,
            pad_id=pad_id,
            provider_id=provider_id,
            tag_id=tag_id,
            vehicle_id=vehicle_id,
            state_abbr=state_abbr,
            country_code=country_code,
            search=search,
            slug=slug,
            limit=limit,
            direction=direction,
            page=page,
        ).build()
        response = _fetch(lambda client: client.launches(params))
    _emit(response, build_launches_table(response.result), as_json=as_json, output=output)


@app.command()
def companies(
    id_: int | None = _ID_OPTION,
    name: str | None = typer.Option(None, "--name"),
    country_code: str | None = typer.Option(None, "--country", help="ISO 3166 country code."),
    slug: str | None = typer.Option(None, "--slug"),
    inactive: bool | None = typer.Option(None, "--inactive/--active", help="Filter on inactive companies."),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launch service companies."""

    with _handle_errors():
        params = _apply(
            CompanyParamsBuilder(),
            id=id_,
            name=name,
            country_code=country_code,
            slug=slug,
            inactive=inactive,
            page=page,
        ).build()
        response = _fetch(lambda client: client.companies(params))
    _emit(response, build_companies_table(response.result), as_json=as_json, output=output)


@app.command()
def locations(
    id_: int | None = _ID_OPTION,
    name: str | None = typer.Option(None, "--name"),
    state_abbr: str | None = typer.Option(None, "--state", help="US state abbreviation."),
    country_code: str | None = typer.Option(None, "--country", help="ISO 3166 country code."),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launch locations."""

    with _handle_errors():
        params = _apply(
            LocationParamsBuilder(),
            id=id_,
            name=name,
            state_abbr=state_abbr,
            country_code=country_code,
            page=page,
        ).build()
        response = _fetch(lambda client: client.locations(params))
    _emit(response, build_locations_table(response.result), as_json=as_json, output=output)


@app.command()
def missions(
    id_: int | None = _ID_OPTION,
    name: str | None = typer.Option(None, "--name"),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List missions."""

    with _handle_errors():
        params = _apply(MissionParamsBuilder(), id=id_, name=name, page=page).build()
        response = _fetch(lambda client: client.missions(params))
    _emit(response, build_missions_table(response.result), as_json=as_json, output=output)


@app.command()
def pads(
    id_: int | None = _ID_OPTION,
    name: str | None = typer.Option(None, "--name"),
    state_abbr: str | None = typer.Option(None, "--state", help="US state abbreviation."),
    country_code: str | None = typer.Option(None, "--country", help="ISO 3166 country code."),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launch pads."""

    with _handle_errors():
        params = _apply(
            PadParamsBuilder(),
            id=id_,
            name=name,
            state_abbr=state_abbr,
            country_code=country_code,
            page=page,
        ).build()
        response = _fetch(lambda client: client.pads(params))
    _emit(response, build_pads_table(response.result), as_json=as_json, output=output)


@app.command()
def tags(
    id_: int | None = _ID_OPTION,
    text: str | None = typer.Option(None, "--text"),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launch tags."""

    with _handle_errors():
        params = _apply(TagParamsBuilder(), id=id_, text=text, page=page).build()
        response = _fetch(lambda client: client.tags(params))
    _emit(response, build_tags_table(response.result), as_json=as_json, output=output)


@app.command()
def vehicles(
    id_: int | None = _ID_OPTION,
    name: str | None = typer.Option(None, "--name"),
    page: int | None = _PAGE_OPTION,
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List launch vehicles."""

    with _handle_errors():
        params = _apply(VehicleParamsBuilder(), id=id_, name=name, page=page).build()
        response = _fetch(lambda client: client.vehicles(params))
    _emit(response, build_vehicles_table(response.result), as_json=as_json, output=output)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
