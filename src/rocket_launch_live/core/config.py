"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://fdo.rocketlaunch.live"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rocket-launch-live"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rocket-launch-live"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rocket-launch-live"
    return Path.home() / ".config" / "rocket-launch-live"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write or update variables in the user's global .env file.

    Existing keys not present in `values` are kept; `None` values are skipped.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# rocket-launch-live user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Values come from `RLL_*` environment variables, then the project `.env`,
    then the user config `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="RLL_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="RocketLaunch.Live API key (sent as a Bearer token).",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the RocketLaunch.Live API.",
    )
    user_agent: str = Field(
        default="rocket-launch-live/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset keeps the httpx default.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the rocket_launch_live logger.",
    )
