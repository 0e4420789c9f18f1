"""The program's own settings, kept as a TOML file in the user config directory."""

from __future__ import annotations

import tomllib
from contextlib import suppress
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

CONFIG_NAME = "steam-optionx"
CONFIG_FILE = "default-config.toml"


@dataclass
class Config:
    """Saved settings: the chosen Steam file, default launch options and sort order."""

    steam_config: str | None = None
    default_launch_options: str = ""
    app_sort: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {
            "steam_config": self.steam_config,
            "default_launch_options": self.default_launch_options,
            "app_sort": self.app_sort,
        }
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from parsed TOML; raises ValueError if it does not fit."""
        steam_config = data.get("steam_config")
        app_sort = data.get("app_sort")
        default_launch_options = data.get("default_launch_options")
        if not isinstance(default_launch_options, str):
            raise ValueError("default_launch_options must be a string")
        for name, value in (("steam_config", steam_config), ("app_sort", app_sort)):
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string")
        return cls(steam_config, default_launch_options, app_sort)


def config_path() -> Path:
    """Where the settings file lives by default."""
    return Path(platformdirs.user_config_dir(CONFIG_NAME, appauthor=False)) / CONFIG_FILE


def load_config(path: str | PathLike[str] | None = None) -> Config:
    """Load the settings, falling back to defaults if the file is unusable.

    A missing file is created holding the defaults.
    """
    path = Path(path) if path is not None else config_path()
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        config = Config()
        with suppress(OSError):
            store_config(config, path)
        return config
    except OSError:
        return Config()
    try:
        return Config.from_dict(tomllib.loads(raw.decode("utf-8")))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValueError):
        return Config()


def store_config(config: Config, path: str | PathLike[str] | None = None) -> None:
    """Write the settings, creating the directory if needed."""
    path = Path(path) if path is not None else config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(config.to_dict()), encoding="utf-8")