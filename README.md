# steam-optionx

A small desktop tool for editing the launch options of your Steam apps all at once.

Steam keeps each app's launch options in
`Steam/userdata/XXXXXXXX/config/localconfig.vdf`. This tool reads that file,
lists the apps in it next to their launch options, and writes your changes back.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python installations;
on some Linux distributions it is a separate system package (often `python3-tk`).

## Running

```
steam-optionx
```

On start the full app list is downloaded from the Steam Web API so that app IDs
can be shown with their names. If that download fails, the program exits with
an error message. Only apps whose IDs appear in that list are shown.

1. Click **Open file…** and pick your `localconfig.vdf`. The path is remembered
   in the settings, and a one-time copy of the file is kept next to it as
   `localconfig.vdf.orig` (it is never overwritten once it exists).
2. Edit the launch options in the table. Use the sort menu to order apps by ID
   or by name (ascending or descending), and the filter box to narrow the list
   to names containing the text, ignoring case.
3. Set **default launch options** to fill in every app whose launch options are
   empty when you save.
4. Click **Save**. The settings are stored, the current file is copied to
   `localconfig.vdf.bak`, and the new launch options are written.

**Clear** empties all launch options in the table; **Restore** brings back the
values read from the file when it was opened. Neither touches the file until
you save. Clicking an app's name copies its Steam store page address to the
clipboard.

Close Steam before saving, because Steam rewrites this file when it exits.

### What saving changes

When the file is written, each app's entry under
`UserLocalConfigStore/Software/Valve/Steam/apps` is replaced by one holding only
its `LaunchOptions` (or nothing, if the options are blank). Any other per-app
values in those entries are dropped, as are comments and platform conditionals
such as `[$WIN32]` anywhere in the file. The rest of the file's keys and values
are kept. Keep the `.orig` and `.bak` copies if you may need them.

## Settings

The chosen file, the default launch options and the sort order are kept in
`default-config.toml` in your user configuration directory
(`steam_optionx.config.config_path()`). A missing or unreadable settings file
falls back to defaults.

## Using it as a library

The pieces behind the window can be used on their own:

- `steam_optionx.vdf` parses and writes the text KeyValues format (`loads`,
  `dumps`) and reads or updates launch options in a `localconfig.vdf`
  (`read`, `write`). Malformed files raise `VdfError`.
- `steam_optionx.api.app_names()` downloads a mapping of app ID to app name;
  `parse_app_list` builds that mapping from an already decoded response.
- `steam_optionx.apps` has `App`, `AppSort`, `get_apps`, `sort_apps`,
  `is_filtered`, `backup_file` and `userdata_dir`.
- `steam_optionx.config` has `Config`, `load_config`, `store_config` and
  `config_path`.
- `steam_optionx.editor.Editor` holds the editing state used by the window:
  `open_file`, `visible_apps`, `launch_options_for`, `set_launch_options`,
  `save`, `clear` and `restore`.

```python
from steam_optionx import vdf

options = vdf.read("localconfig.vdf")
options[440] = "-novid"
vdf.write("localconfig.vdf", options)
```

## Running the tests

```
pip install ".[test]"
pytest
```