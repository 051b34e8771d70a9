"""Typed, asynchronous client for the RocketLaunch.Live API.

    from datetime import date

    from rocket_launch_live import Direction, LaunchParamsBuilder, RocketLaunchLive

    client = RocketLaunchLive(api_key)
    params = (
        LaunchParamsBuilder()
        .country_code("US")
        .after_date(date(2023, 9, 1))
        .search("ISS")
        .direction(Direction.DESCENDING)
        .limit(10)
        .build()
    )
    response = await client.launches(params)
    for launch in response.result:
        print(launch.date_str, launch.vehicle.name, launch.name)
"""

from rocket_launch_live.adapters.api_client import RocketLaunchLive
from rocket_launch_live.core.config import AppSettings
from rocket_launch_live.core.domain.models import (
    Company,
    Country,
    EstDate,
    Launch,
    Location,
    Media,
    Mission,
    Pad,
    Provider,
    Response,
    Tag,
    Vehicle,
)
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
from rocket_launch_live.core.errors import (
    APIStatusError,
    ConfigurationError,
    DecodeError,
    InvalidParamsError,
    RocketLaunchLiveError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
	"APIStatusError",
	"AppSettings",
	"Company",
	"CompanyParamsBuilder",
	"ConfigurationError",
	"Country",
	"DecodeError",
	"Direction",
	"EstDate",
	"InvalidParamsError",
	"Launch",
	"LaunchParamsBuilder",
	"Location",
	"LocationParamsBuilder",
	"Media",
	"Mission",
	"MissionParamsBuilder",
	"Pad",
	"PadParamsBuilder",
	"Params",
	"Provider",
	"Response",
	"RocketLaunchLive",
	"RocketLaunchLiveError",
	"Tag",
	"TagParamsBuilder",
	"TransportError",
	"Vehicle",
	"VehicleParamsBuilder",
]
