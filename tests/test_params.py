"""Tests for the query parameter builders."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from rocket_launch_live.core.domain.params import (
    CompanyParamsBuilder,
    Direction,
    LaunchParamsBuilder,
    LocationParamsBuilder,
    MissionParamsBuilder,
    PadParamsBuilder,
    Params,
    TagParamsBuilder,
    VehicleParamsBuilder,
)
from rocket_launch_live.core.errors import InvalidParamsError, RocketLaunchLiveError


class TestLaunchParamsBuilder:
    def test_example_filter_renders_five_parameters(self):
        params = (
            LaunchParamsBuilder()
            .country_code("US")
            .after_date(date(2023, 9, 1))
            .search("ISS")
            .direction(Direction.DESCENDING)
            .limit(10)
            .build()
        )

        assert params.as_query() == [
            ("after_date", "2023-09-01"),
            ("country_code", "US"),
            ("search", "ISS"),
            ("limit", "10"),
            ("direction", "desc"),
        ]
        assert params.to_query_string() == "after_date=2023-09-01&country_code=US&search=ISS&limit=10&direction=desc"

    def test_only_set_fields_are_rendered(self):
        params = LaunchParamsBuilder().pad_id(2).build()
        assert params.keys() == ["pad_id"]

    def test_empty_builder_renders_nothing(self):
        params = LaunchParamsBuilder().build()
        assert params.as_query() == []
        assert not params
        assert str(params) == ""

    def test_all_fields_render_in_fixed_order(self):
        params = (
            LaunchParamsBuilder()
            .direction(Direction.ASCENDING)
            .modified_since(datetime(2023, 8, 1, 12, 30, 5))
            .page(2)
            .limit(5)
            .slug("starlink")
            .search("moon")
            .country_code("US")
            .state_abbr("FL")
            .vehicle_id(1)
            .tag_id(64)
            .provider_id(1)
            .pad_id(2)
            .location_id(61)
            .before_date(date(2023, 12, 31))
            .after_date(date(2023, 1, 1))
            .cospar_id("2023-001")
            .id(4000)
            .build()
        )

        assert params.keys() == [
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
        ]
        rendered = dict(params.as_query())
        assert rendered["modified_since"] == "2023-08-01T12:30:05Z"
        assert rendered["direction"] == "asc"

    def test_last_write_wins(self):
        params = LaunchParamsBuilder().search("ISS").search("Artemis").limit(3).limit(7).build()
        assert params.as_query() == [("search", "Artemis"), ("limit", "7")]

    def test_dates_accept_iso_strings(self):
        params = LaunchParamsBuilder().after_date("2023-09-01").before_date("2023-09-30").build()
        assert params.as_query() == [("after_date", "2023-09-01"), ("before_date", "2023-09-30")]

    def test_same_day_range_is_valid(self):
        day = date(2023, 9, 1)
        params = LaunchParamsBuilder().after_date(day).before_date(day).build()
        assert params.keys() == ["after_date", "before_date"]

    def test_before_date_preceding_after_date_fails(self):
        builder = LaunchParamsBuilder().after_date(date(2023, 9, 10))
        with pytest.raises(InvalidParamsError) as excinfo:
            builder.before_date(date(2023, 9, 1))

        assert excinfo.value.field == "before_date"
        assert excinfo.value.code == "validation_error"

    def test_after_date_set_last_is_checked_too(self):
        with pytest.raises(InvalidParamsError):
            LaunchParamsBuilder().before_date(date(2023, 9, 1)).after_date(date(2023, 9, 2)).build()

    @pytest.mark.parametrize("days", [1, 30, 365])
    def test_inverted_ranges_always_fail(self, days):
        start = date(2024, 2, 28)
        with pytest.raises(InvalidParamsError):
            LaunchParamsBuilder().after_date(start).before_date(start - timedelta(days=days)).build()

    @pytest.mark.parametrize("value", [None, "not-a-date", "2023-13-01"])
    def test_unparseable_dates_fail(self, value):
        with pytest.raises(InvalidParamsError, match="Could not parse date"):
            LaunchParamsBuilder().after_date(value)

    def test_modified_since_from_date_and_time(self):
        params = LaunchParamsBuilder().modified_since(date(2023, 9, 1), time(6, 0)).build()
        assert params.as_query() == [("modified_since", "2023-09-01T06:00:00Z")]

    def test_modified_since_date_without_time_fails(self):
        with pytest.raises(InvalidParamsError, match="Could not parse time"):
            LaunchParamsBuilder().modified_since(date(2023, 9, 1))

    def test_modified_since_converts_aware_datetimes_to_utc(self):
        cest = timezone(timedelta(hours=2))
        params = LaunchParamsBuilder().modified_since(datetime(2023, 9, 1, 8, 0, tzinfo=cest)).build()
        assert params.as_query() == [("modified_since", "2023-09-01T06:00:00Z")]

    def test_modified_since_accepts_iso_string(self):
        params = LaunchParamsBuilder().modified_since("2023-09-01T06:00:00Z").build()
        assert params.as_query() == [("modified_since", "2023-09-01T06:00:00Z")]

    @pytest.mark.parametrize("limit", [0, -5])
    def test_limit_must_be_positive(self, limit):
        with pytest.raises(InvalidParamsError):
            LaunchParamsBuilder().limit(limit)

    def test_page_must_be_positive(self):
        with pytest.raises(InvalidParamsError):
            LaunchParamsBuilder().page(0)

    def test_direction_accepts_tokens(self):
        params = LaunchParamsBuilder().direction("asc").build()
        assert params.as_query() == [("direction", "asc")]

    def test_unknown_direction_fails(self):
        with pytest.raises(InvalidParamsError):
            LaunchParamsBuilder().direction("sideways")

    @pytest.mark.parametrize("setter", ["search", "country_code", "slug", "id", "pad_id"])
    def test_none_is_rejected_by_plain_setters(self, setter):
        builder = LaunchParamsBuilder().search("ISS")
        with pytest.raises(InvalidParamsError) as excinfo:
            getattr(builder, setter)(None)

        assert excinfo.value.field == setter
        assert builder.build().as_query() == [("search", "ISS")]

    def test_validation_errors_share_base_class(self):
        with pytest.raises(RocketLaunchLiveError):
            LaunchParamsBuilder().limit(0)


class TestOtherBuilders:
    def test_company_booleans_render_lowercase(self):
        params = CompanyParamsBuilder().inactive(True).country_code("US").name("SpaceX").build()
        assert params.as_query() == [("name", "SpaceX"), ("country_code", "US"), ("inactive", "true")]

    def test_company_inactive_false_is_rendered(self):
        params = CompanyParamsBuilder().inactive(False).build()
        assert params.as_query() == [("inactive", "false")]

    def test_company_all_fields(self):
        params = CompanyParamsBuilder().page(3).slug("spacex").id(1).build()
        assert params.keys() == ["id", "slug", "page"]

    def test_location_builder(self):
        params = LocationParamsBuilder().country_code("US").state_abbr("FL").name("Cape").id(61).page(1).build()
        assert params.keys() == ["id", "name", "state_abbr", "country_code", "page"]

    def test_pad_builder(self):
        params = PadParamsBuilder().name("SLC-40").country_code("US").build()
        assert params.as_query() == [("name", "SLC-40"), ("country_code", "US")]

    def test_mission_builder(self):
        params = MissionParamsBuilder().name("Crew-7").page(2).build()
        assert params.as_query() == [("name", "Crew-7"), ("page", "2")]

    def test_tag_builder(self):
        params = TagParamsBuilder().text("Starlink").id(64).build()
        assert params.as_query() == [("id", "64"), ("text", "Starlink")]

    def test_vehicle_builder(self):
        params = VehicleParamsBuilder().name("Falcon 9").build()
        assert params.to_query_string() == "name=Falcon+9"

    def test_builders_only_expose_their_fields(self):
        assert not hasattr(TagParamsBuilder(), "country_code")
        assert not hasattr(VehicleParamsBuilder(), "limit")


class TestParams:
    def test_params_are_immutable(self):
        params = VehicleParamsBuilder().name("Electron").build()
        with pytest.raises(Exception):
            params.items = ()

    def test_build_returns_independent_snapshots(self):
        builder = MissionParamsBuilder().name("first")
        first = builder.build()
        builder.name("second")

        assert first.as_query() == [("name", "first")]
        assert builder.build().as_query() == [("name", "second")]

    def test_default_params_are_empty(self):
        assert Params().as_query() == []
