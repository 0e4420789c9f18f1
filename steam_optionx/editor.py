"""The editing session behind the window: apps, pending launch options and saving."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import suppress
from dataclasses import replace
from os import PathLike

from steam_optionx import vdf
from steam_optionx.apps import (
    ORIGINAL_BACKUP,
    App,
    AppSort,
    backup_file,
    get_apps,
    is_filtered,
    sort_apps,
)
from steam_optionx.config import Config, load_config, store_config

SAVE_BACKUP = ".bak"


class Editor:
    """Launch options being edited for the apps of one Steam config file.

    ``apps`` holds what was read from the file; ``all_launch_options`` holds
    the edited values that a save writes back.
    """

    def __init__(
        self,
        app_names: Mapping[int, str],
        steam_config: str | PathLike[str] | None = None,
        default_launch_options: str = "",
        app_sort: AppSort = AppSort.ID_ASCENDING,
        config_path: str | PathLike[str] | None = None,
    ) -> None:
        self.app_names = dict(app_names)
        self.steam_config = None if steam_config is None else str(steam_config)
        self.default_launch_options = default_launch_options
        self.app_sort = app_sort
        self.config_path = config_path
        self.filter_apps = ""
        self.apps: dict[int, App] | None = None
        self.all_launch_options: dict[int, str] = {}
        if self.steam_config is not None:
            backup_file(self.steam_config, ORIGINAL_BACKUP)
            self.apps = self._load_apps(self.steam_config)

    def _load_apps(self, path: str) -> dict[int, App]:
        try:
            properties = vdf.read(path)
        except (OSError, ValueError):
            properties = {}
        return get_apps(properties, self.app_names)

    def open_file(self, path: str | PathLike[str]) -> None:
        """Switch to another Steam config file and remember it in the settings."""
        picked = str(path)
        self.steam_config = picked
        saved = load_config(self.config_path)
        with suppress(OSError):
            store_config(replace(saved, steam_config=picked), self.config_path)
        self.apps = self._load_apps(picked)
        backup_file(picked, ORIGINAL_BACKUP)

    def launch_options_for(self, appid: int) -> str:
        """The current launch options of an app, starting from the file's value."""
        if appid not in self.all_launch_options:
            if self.apps is None or appid not in self.apps:
                raise KeyError(appid)
            self.all_launch_options[appid] = self.apps[appid].launch_options
        return self.all_launch_options[appid]

    def set_launch_options(self, appid: int, value: str) -> None:
        """Replace the pending launch options of an app."""
        self.all_launch_options[appid] = value

    def visible_apps(self) -> list[tuple[int, App]]:
        """The apps passing the filter, in the chosen order.

        Every app, shown or not, gets an entry among the pending options.
        """
        if self.apps is None:
            return []
        visible = []
        for appid, app in sort_apps(self.app_sort, self.apps):
            self.launch_options_for(appid)
            if is_filtered(self.filter_apps, app.name):
                visible.append((appid, app))
        return visible

    def save(self) -> bool:
        """Store the settings and write pending launch options to the Steam file.

        Empty options take the default when one is set. Returns whether the
        Steam file was written.
        """
        if self.steam_config is None:
            raise RuntimeError("no Steam config file has been opened")
        saved = load_config(self.config_path)
        with suppress(OSError):
            store_config(
                Config(saved.steam_config, self.default_launch_options, self.app_sort.value),
                self.config_path,
            )
        if self.default_launch_options.strip():
            for appid, launch_options in self.all_launch_options.items():
                if not launch_options:
                    self.all_launch_options[appid] = self.default_launch_options
        backup_file(self.steam_config, SAVE_BACKUP)
        try:
            vdf.write(self.steam_config, self.all_launch_options)
        except (OSError, ValueError):
            return False
        return True

    def clear(self) -> None:
        """Empty every pending launch option."""
        for appid in self.all_launch_options:
            self.all_launch_options[appid] = ""

    def restore(self) -> None:
        """Put back the launch options read from the file."""
        for appid, app in (self.apps or {}).items():
            self.all_launch_options[appid] = app.launch_options