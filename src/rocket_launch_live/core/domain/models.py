"""API models (Pydantic v2).

These models mirror the JSON returned by the RocketLaunch.Live API. They
describe *what* comes back, not *how* it is fetched.

Notes:
- Unknown fields are ignored so new server-side keys never break decoding.
- Sub-records (a launch's vehicle, a pad's location) are embedded copies.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Country(ApiModel):
    name: str
    code: str


class Company(ApiModel):
    id: int | None = None
    name: str
    inactive: bool
    country: Country


class Provider(ApiModel):
    id: int | None = None
    name: str
    slug: str | None = None


class Vehicle(ApiModel):
    id: int | None = None
    name: str
    company_id: int | None = None
    slug: str


class Location(ApiModel):
    id: int | None = None
    name: str
    state: str | None = None
    statename: str | None = None
    country: str
    slug: str


class Pad(ApiModel):
    id: int | None = None
    name: str
    location: Location


class Mission(ApiModel):
    id: int | None = None
    name: str
    description: str | None = None


class Tag(ApiModel):
    id: int | None = None
    text: str


class EstDate(ApiModel):
    """Estimated launch date, filled in as precision improves."""

    month: int | None = None
    day: int | None = None
    year: int | None = None
    quarter: Any = None


class Media(ApiModel):
    id: int | None = None
    media_url: str | None = None
    youtube_vidid: str | None = None
    featured: bool
    ldfeatured: bool
    approved: bool


class Launch(ApiModel):
    """A single launch, past or upcoming.

    Window and weather fields are loosely typed: the server sends strings,
    numbers or null depending on how much is known about the launch.
    """

    id: int | None = None
    cospar_id: str | None = None
    sort_date: str
    name: str
    provider: Provider
    vehicle: Vehicle
    pad: Pad
    missions: list[Mission] = Field(default_factory=list)
    mission_description: str | None = None
    launch_description: str
    win_open: Any = None
    t0: str | None = None
    win_close: Any = None
    est_date: EstDate
    date_str: str
    tags: list[Tag] = Field(default_factory=list)
    slug: str
    weather_summary: Any = None
    weather_temp: Any = None
    weather_condition: Any = None
    weather_wind_mph: Any = None
    weather_icon: Any = None
    weather_updated: Any = None
    quicktext: str
    media: list[Media] = Field(default_factory=list)
    result: int | None = None
    suborbital: bool
    modified: str


T = TypeVar("T", bound=BaseModel)


class Response(ApiModel, Generic[T]):
    """Envelope returned by every endpoint.

    `result` keeps the order sent by the server. When `count` is present it
    must match the number of records in `result`.
    """

    errors: list[str] | None = None
    valid_auth: bool
    count: int | None = None
    limit: int | None = None
    total: int | None = None
    last_page: int | None = None
    result: list[T]

    @model_validator(mode="after")
    def _check_count(self) -> "Response[T]":
        if self.count is not None and self.count != len(self.result):
            raise ValueError(
                f"count field ({self.count}) does not match the number of results ({len(self.result)})"
            )
        return self
