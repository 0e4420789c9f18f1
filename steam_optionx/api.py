"""Fetching the names of Steam apps from the Steam Web API."""

from __future__ import annotations

import json
import urllib.request
from collections.abc import Mapping
from typing import Any

APP_LIST_URL = "https://api.steampowered.com/ISteamApps/GetAppList/v2/"
REQUEST_TIMEOUT = 60.0
_MAX_APPID = 2**32 - 1


def parse_app_list(payload: Any) -> dict[int, str]:
    """Map app ids to names from a decoded GetAppList response.

    Raises ValueError if the payload does not have the expected shape.
    """
    try:
        entries = payload["applist"]["apps"]
    except (KeyError, TypeError) as exc:
        raise ValueError("app list payload lacks applist.apps") from exc
    if not isinstance(entries, list):
        raise ValueError("applist.apps is not a list")

    result: dict[int, str] = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ValueError(f"app entry is not an object: {entry!r}")
        appid = entry.get("appid")
        name = entry.get("name")
        if isinstance(appid, bool) or not isinstance(appid, int) or not 0 <= appid <= _MAX_APPID:
            raise ValueError(f"invalid app id: {appid!r}")
        if not isinstance(name, str):
            raise ValueError(f"invalid app name for {appid}: {name!r}")
        result[appid] = name
    return dict(sorted(result.items()))


def app_names() -> dict[int, str]:
    """Download the full list of Steam apps, keyed by app id."""
    with urllib.request.urlopen(APP_LIST_URL, timeout=REQUEST_TIMEOUT) as response:
        payload = json.load(response)
    return parse_app_list(payload)