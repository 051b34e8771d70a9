"""CLI UI components (Rich).

Keeps table layout out of the command functions.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from rocket_launch_live.core.domain.models import (
    Company,
    Launch,
    Location,
    Mission,
    Pad,
    Response,
    Tag,
    Vehicle,
)


def _opt(value: object) -> str:
    return "" if value is None else str(value)


def build_launches_table(launches: Sequence[Launch]) -> Table:
    table = Table(title="Launches")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Vehicle", style="white")
    table.add_column("Name", style="bold white")
    table.add_column("Provider", style="magenta")
    table.add_column("Pad", style="dim")
    for launch in launches:
        table.add_row(
            launch.date_str,
            launch.vehicle.name,
            launch.name,
            launch.provider.name,
            f"{launch.pad.name}, {launch.pad.location.name}",
        )
    return table


def build_companies_table(companies: Sequence[Company]) -> Table:
    table = Table(title="Companies")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Country", style="cyan")
    table.add_column("Inactive", style="yellow")
    for company in companies:
        table.add_row(
            _opt(company.id),
            company.name,
            f"{company.country.name} ({company.country.code})",
            "yes" if company.inactive else "no",
        )
    return table


def build_locations_table(locations: Sequence[Location]) -> Table:
    table = Table(title="Locations")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("State", style="white")
    table.add_column("Country", style="cyan")
    for location in locations:
        table.add_row(_opt(location.id), location.name, _opt(location.statename or location.state), location.country)
    return table


def build_missions_table(missions: Sequence[Mission]) -> Table:
    table = Table(title="Missions")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Description", style="white")
    for mission in missions:
        table.add_row(_opt(mission.id), mission.name, _opt(mission.description))
    return table


def build_pads_table(pads: Sequence[Pad]) -> Table:
    table = Table(title="Pads")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Location", style="white")
    table.add_column("Country", style="cyan")
    for pad in pads:
        table.add_row(_opt(pad.id), pad.name, pad.location.name, pad.location.country)
    return table


def build_tags_table(tags: Sequence[Tag]) -> Table:
    table = Table(title="Tags")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Text", style="bold white")
    for tag in tags:
        table.add_row(_opt(tag.id), tag.text)
    return table


def build_vehicles_table(vehicles: Sequence[Vehicle]) -> Table:
    table = Table(title="Vehicles")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Company ID", style="white")
    table.add_column("Slug", style="dim")
    for vehicle in vehicles:
        table.add_row(_opt(vehicle.id), vehicle.name, _opt(vehicle.company_id), vehicle.slug)
    return table


def build_summary_text(response: Response) -> Text:
    """One-line footer with the envelope's pagination metadata."""

    parts = [f"{len(response.result)} result(s)"]
    if response.total is not None:
        parts.append(f"total {response.total}")
    if response.last_page is not None:
        parts.append(f"last page {response.last_page}")
    return Text(" • ".join(parts), style="dim")
