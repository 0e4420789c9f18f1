"""Steam apps with their launch options: lookup, filtering, sorting and backups."""

from __future__ import annotations

import shutil
import sys
from contextlib import suppress
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import platformdirs

ORIGINAL_BACKUP = ".orig"


@dataclass(frozen=True)
class App:
    """An installed app's name and its launch options as read from Steam."""

    name: str
    launch_options: str = ""


class AppSort(Enum):
    """Orderings of the app list; the value is the label shown and saved."""

    ID_ASCENDING = "App ID Ascending"
    ID_DESCENDING = "App ID Descending"
    NAME_ASCENDING = "App Name Ascending"
    NAME_DESCENDING = "App Name Descending"

    @classmethod
    def from_label(cls, value: str) -> AppSort:
        """The ordering with this label, or ID ascending for an unknown one."""
        try:
            return cls(value)
        except ValueError:
            return cls.ID_ASCENDING


def get_apps(properties: Mapping[int, str], app_names: Mapping[int, str]) -> dict[int, App]:
    """Pair launch options with app names, dropping apps whose name is unknown."""
    return {
        appid: App(app_names[appid], launch_options)
        for appid, launch_options in sorted(properties.items())
        if appid in app_names
    }


def is_filtered(filter_text: str, app_name: str) -> bool:
    """Whether an app name passes the case-insensitive substring filter."""
    return not filter_text or filter_text.strip().lower() in app_name.lower()


def sort_apps(sort: AppSort, apps: Mapping[int, App]) -> list[tuple[int, App]]:
    """The apps as (app id, app) pairs in the requested order.

    Apps with names equal apart from case stay in ascending id order.
    """
    by_id = sorted(apps.items())
    match sort:
        case AppSort.ID_ASCENDING:
            return by_id
        case AppSort.ID_DESCENDING:
            return by_id[::-1]
        case AppSort.NAME_ASCENDING:
            return sorted(by_id, key=lambda item: item[1].name.lower())
        case AppSort.NAME_DESCENDING:
            return sorted(by_id, key=lambda item: item[1].name.lower(), reverse=True)
    raise ValueError(f"unknown sort order: {sort!r}")


def backup_file(picked_path: str, ext: str) -> None:
    """Copy a file next to itself with an extra extension.

    The ".orig" backup is made only once and never overwritten; copy
    failures are ignored.
    """
    backup_path = Path(picked_path + ext)
    if ext == ORIGINAL_BACKUP and backup_path.is_file():
        return
    with suppress(OSError):
        shutil.copy(picked_path, backup_path)


def userdata_dir() -> Path:
    """The usual location of Steam's per-user data directories."""
    if sys.platform == "win32":
        return Path(r"C:\Program Files (x86)\Steam\userdata")
    return Path(platformdirs.user_data_dir()) / "Steam" / "userdata"