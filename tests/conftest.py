"""Shared fixtures: sample API payloads and a mocked transport."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from rocket_launch_live.adapters.api_client import RocketLaunchLive
from rocket_launch_live.core.config import AppSettings

API_KEY = "test-key"
BASE_URL = "https://rll.test"


def make_launch(index: int) -> dict[str, Any]:
    return {
        "id": 4000 + index,
        "cospar_id": f"2023-{index:03d}",
        "sort_date": str(1693526400 + index * 3600),
        "name": f"Starlink Group {index}",
        "provider": {"id": 1, "name": "SpaceX", "slug": "spacex"},
        "vehicle": {"id": 1, "name": "Falcon 9", "company_id": 1, "slug": "falcon-9"},
        "pad": {
            "id": 2,
            "name": "SLC-40",
            "location": {
                "id": 61,
                "name": "Cape Canaveral SFS",
                "state": "FL",
                "statename": "Florida",
                "country": "United States",
                "slug": "cape-canaveral-sfs",
            },
        },
        "missions": [{"id": 7000 + index, "name": f"Starlink Group {index}", "description": None}],
        "mission_description": None,
        "launch_description": f"A SpaceX Falcon 9 rocket will launch Starlink Group {index}.",
        "win_open": None,
        "t0": "2023-09-01T02:21Z",
        "win_close": None,
        "est_date": {"month": 9, "day": 1, "year": 2023, "quarter": None},
        "date_str": "Sep 01",
        "tags": [{"id": 64, "text": "Starlink"}],
        "slug": f"starlink-group-{index}",
        "weather_summary": "Partly Cloudy",
        "weather_temp": 78.8,
        "weather_condition": "Partly Cloudy",
        "weather_wind_mph": 9.1,
        "weather_icon": "wi-day-cloudy",
        "weather_updated": "2023-09-01T00:00:00+00:00",
        "quicktext": f"Falcon 9 - Starlink Group {index} - Sep 01 (estimated)",
        "media": [
            {
                "id": 900 + index,
                "media_url": None,
                "youtube_vidid": "abc123",
                "featured": False,
                "ldfeatured": False,
                "approved": True,
            }
        ],
        "result": -1,
        "suborbital": False,
        "modified": "2023-08-30T12:00:00+00:00",
    }


def make_envelope(result: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "errors": None,
        "valid_auth": True,
        "count": len(result),
        "limit": 25,
        "total": len(result),
        "last_page": 1,
        "result": result,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def launches_payload() -> dict[str, Any]:
    return make_envelope([make_launch(i) for i in range(10)])


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> AppSettings:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("RLL_API_KEY", raising=False)
    return AppSettings(_env_file=None, api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], RocketLaunchLive]:
    """Build a client whose requests are answered by `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RocketLaunchLive:
        return RocketLaunchLive(settings=settings, transport=httpx.MockTransport(handler))

    return _make
