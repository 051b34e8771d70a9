"""Query parameter builders.

One builder per endpoint accumulates optional filters and renders them with
`build()` into an immutable `Params` object the client sends as query
string. Only fields that were set are rendered, always in the same order.

    params = (
        LaunchParamsBuilder()
        .country_code("US")
        .after_date(date(2023, 9, 1))
        .search("ISS")
        .direction(Direction.DESCENDING)
        .limit(10)
        .build()
    )
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, ClassVar, Self
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic.config import ConfigDict

from rocket_launch_live.core.errors import InvalidParamsError


class Direction(str, Enum):
    """Sort order of the results; unset means the server default."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class Params(BaseModel):
    """Rendered query parameters, as ordered `(key, value)` pairs."""

    model_config = ConfigDict(frozen=True)

    items: tuple[tuple[str, str], ...] = ()

    def as_query(self) -> list[tuple[str, str]]:
        return list(self.items)

    def to_query_string(self) -> str:
        return urlencode(self.items)

    def keys(self) -> list[str]:
        return [key for key, _ in self.items]

    def __bool__(self) -> bool:
        return bool(self.items)

    def __str__(self) -> str:
        return self.to_query_string()


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Direction):
        return value.value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _coerce_date(value: date | str | None, field: str) -> date:
    if value is None:
        raise InvalidParamsError("Could not parse date.", field=field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidParamsError("Could not parse date.", field=field, context={"value": str(value)}) from exc


def _coerce_datetime(value: datetime | date | str | None, at: time | None, field: str) -> datetime:
    if value is None:
        raise InvalidParamsError("Could not parse date.", field=field)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        if at is None:
            raise InvalidParamsError("Could not parse time.", field=field)
        return datetime.combine(value, at)
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError) as exc:
        raise InvalidParamsError("Could not parse date.", field=field, context={"value": str(value)}) from exc
    return parsed


def _positive(value: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidParamsError(f"{field} must be a positive integer.", field=field, context={"value": value})
    return value


class ParamsBuilder:
    """Base accumulator shared by every endpoint builder.

    Subclasses list their query keys in `_order`, which is also the render
    order used by `build()`. Setters reject `None`; a filter that was never
    set is simply left out of the query.
    """

    _order: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, key: str, value: Any) -> Self:
        if value is None:
            raise InvalidParamsError(f"{key} must not be None.", field=key)
        self._values[key] = value
        return self

    def _validate(self) -> None:
        """Hook for cross-field checks run by `build()`."""

    def id(self, id: int) -> Self:
        return self._set("id", id)

    def page(self, page: int) -> Self:
        return self._set("page", _positive(page, "page"))

    def build(self) -> Params:
        self._validate()
        items = tuple(
            (key, _render(self._values[key]))
            for key in self._order
            if self._values.get(key) is not None
        )
        return Params(items=items)


class CompanyParamsBuilder(ParamsBuilder):
    _order = ("id", "name", "country_code", "slug", "inactive", "page")

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def country_code(self, country_code: str) -> Self:
        return self._set("country_code", country_code)

    def slug(self, slug: str) -> Self:
        return self._set("slug", slug)

    def inactive(self, inactive: bool) -> Self:
        return self._set("inactive", inactive)


class LaunchParamsBuilder(ParamsBuilder):
    _order = (
        "id",
        "cospar_id",
        "after_date",
        "before_date",
        "location_id",
        "pad_id",
        "provider_id",
        "tag_id",
        "vehicle_id",
        "state_abbr",
        "country_code",
        "search",
        "slug",
        "limit",
        "page",
        "modified_since",
        "direction",
    )

    def cospar_id(self, cospar_id: str) -> Self:
        return self._set("cospar_id", cospar_id)

    def after_date(self, after_date: date | str | None) -> Self:
        """Only launches on or after this date. Accepts a `date` or an ISO string."""

        value = _coerce_date(after_date, "after_date")
        self._check_range(value, self._values.get("before_date"))
        return self._set("after_date", value)

    def before_date(self, before_date: date | str | None) -> Self:
        """Only launches on or before this date. Accepts a `date` or an ISO string."""

        value = _coerce_date(before_date, "before_date")
        self._check_range(self._values.get("after_date"), value)
        return self._set("before_date", value)

    def modified_since(self, when: datetime | date | str | None, at: time | None = None) -> Self:
        """Only launches modified since `when`.

        `when` is either a `datetime` (aware values are converted to UTC), a
        `date` combined with `at`, or an ISO 8601 string.
        """

        return self._set("modified_since", _coerce_datetime(when, at, "modified_since"))

    def location_id(self, location_id: int) -> Self:
        return self._set("location_id", location_id)

    def pad_id(self, pad_id: int) -> Self:
        return self._set("pad_id", pad_id)

    def provider_id(self, provider_id: int) -> Self:
        return self._set("provider_id", provider_id)

    def tag_id(self, tag_id: int) -> Self:
        return self._set("tag_id", tag_id)

    def vehicle_id(self, vehicle_id: int) -> Self:
        return self._set("vehicle_id", vehicle_id)

    def state_abbr(self, state_abbr: str) -> Self:
        return self._set("state_abbr", state_abbr)

    def country_code(self, country_code: str) -> Self:
        return self._set("country_code", country_code)

    def search(self, search: str) -> Self:
        return self._set("search", search)

    def slug(self, slug: str) -> Self:
        return self._set("slug", slug)

    def limit(self, limit: int) -> Self:
        return self._set("limit", _positive(limit, "limit"))

    def direction(self, direction: Direction | str) -> Self:
        try:
            value = Direction(direction)
        except ValueError as exc:
            raise InvalidParamsError(
                "direction must be 'asc' or 'desc'.", field="direction", context={"value": str(direction)}
            ) from exc
        return self._set("direction", value)

    @staticmethod
    def _check_range(start: date | None, end: date | None) -> None:
        if start is not None and end is not None and end < start:
            raise InvalidParamsError(
                "before_date must not precede after_date.",
                field="before_date",
                context={"after_date": start.isoformat(), "before_date": end.isoformat()},
            )

    def _validate(self) -> None:
        self._check_range(self._values.get("after_date"), self._values.get("before_date"))


class LocationParamsBuilder(ParamsBuilder):
    _order = ("id", "name", "state_abbr", "country_code", "page")

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def state_abbr(self, state_abbr: str) -> Self:
        return self._set("state_abbr", state_abbr)

    def country_code(self, country_code: str) -> Self:
        return self._set("country_code", country_code)


class MissionParamsBuilder(ParamsBuilder):
    _order = ("id", "name", "page")

    def name(self, name: str) -> Self:
        return self._set("name", name)


class PadParamsBuilder(ParamsBuilder):
    _order = ("id", "name", "state_abbr", "country_code", "page")

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def state_abbr(self, state_abbr: str) -> Self:
        return self._set("state_abbr", state_abbr)

    def country_code(self, country_code: str) -> Self:
        return self._set("country_code", country_code)


class TagParamsBuilder(ParamsBuilder):
    _order = ("id", "text", "page")

    def text(self, text: str) -> Self:
        return self._set("text", text)


class VehicleParamsBuilder(ParamsBuilder):
    _order = ("id", "name", "page")

    def name(self, name: str) -> Self:
        return self._set("name", name)
