"""User configuration and data-directory resolution."""

from __future__ import annotations

import json
import math
import os
import re
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from flextime._exceptions import ConfigError

APP_NAME = "flextime"
CONFIG_FILE = "config.json"
CACHE_FILE = "cache.json"

TOKEN_ENV = "FLEXTIME_API_TOKEN"
DATA_DIR_ENV = "FLEXTIME_DATA_DIR"

_HOLIDAY_RE = re.compile(r"(\d{4}|\*)-(\d{2})-(\d{2})", re.ASCII)


@dataclass(frozen=True, slots=True)
class FlexConfig:
    api_token: str
    hours_per_day: float
    hours_per_week: float
    custom_holidays: tuple[str, ...] = ()
    workspace_id: int | None = None

    def __repr__(self) -> str:
        return (
            f"FlexConfig(api_token='***', "
            f"hours_per_day={self.hours_per_day}, "
            f"hours_per_week={self.hours_per_week}, "
            f"custom_holidays={list(self.custom_holidays)}, "
            f"workspace_id={self.workspace_id})"
        )


def validate_custom_holiday(spec: Any) -> str:
    """Accept ``YYYY-MM-DD`` or ``*-MM-DD`` naming a real day; else ConfigError."""
    if not isinstance(spec, str):
        raise ConfigError("customHolidays", f"expected a date string, got {spec!r}")
    m = _HOLIDAY_RE.fullmatch(spec)
    if m is None:
        raise ConfigError("customHolidays", f"invalid date {spec!r}, expected YYYY-MM-DD or *-MM-DD")
    year = 2000 if m.group(1) == "*" else int(m.group(1))   # 2000: leap year
    try:
        date(year, int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise ConfigError("customHolidays", f"no such day {spec!r}") from None
    return spec


def _positive_number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
        or value <= 0
    ):
        raise ConfigError(key, f"must be a positive number, got {value!r}")
    return float(value)


def config_from_mapping(data: Any) -> FlexConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("config", "must be a JSON object")

    token = data.get("apiToken")
    if not isinstance(token, str) or not token:
        raise ConfigError("apiToken", "must be a non-empty string")

    workspace = data.get("workspaceId")
    if workspace is not None and (isinstance(workspace, bool) or not isinstance(workspace, int)):
        raise ConfigError("workspaceId", f"must be an integer, got {workspace!r}")

    hours_per_day = _positive_number(data, "hoursPerDay")
    hours_per_week = _positive_number(data, "hoursPerWeek")

    holidays = data.get("customHolidays", [])
    if not isinstance(holidays, list):
        raise ConfigError("customHolidays", "must be a list")

    return FlexConfig(
        api_token=token,
        hours_per_day=hours_per_day,
        hours_per_week=hours_per_week,
        custom_holidays=tuple(validate_custom_holiday(h) for h in holidays),
        workspace_id=workspace,
    )


def _resolve_data_dir() -> Path:
    override = os.getenv(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    if sys.platform == "win32":
        base = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def data_dir() -> Path:
    """Directory holding config.json and cache.json, created if missing."""
    path = _resolve_data_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def cache_path() -> Path:
    return data_dir() / CACHE_FILE


def load_config(path: str | os.PathLike[str] | None = None) -> FlexConfig:
    """
    Read and validate config.json.

    ``FLEXTIME_API_TOKEN`` (environment or ``.env``) overrides the file's
    ``apiToken``.
    """
    load_dotenv()
    p = Path(path) if path is not None else _resolve_data_dir() / CONFIG_FILE
    if not p.exists():
        raise ConfigError("config", f"file not found: {p}")
    try:
        with open(p, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigError("config", f"invalid JSON in {p}: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise ConfigError("config", f"cannot read {p}: {exc}") from exc

    token = os.getenv(TOKEN_ENV)
    if token and isinstance(raw, dict):
        raw = {**raw, "apiToken": token}
    return config_from_mapping(raw)
