"""The desktop window for editing launch options, and the program's entry point."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import filedialog, ttk
from tkinter import font as tkfont

from steam_optionx import api
from steam_optionx.apps import AppSort, userdata_dir
from steam_optionx.config import load_config
from steam_optionx.editor import Editor

TITLE = "Steam OptionX"
STORE_URL = "https://store.steampowered.com/app/"
CONFIG_HINT = "Steam/userdata/XXXXXXXX/config/localconfig.vdf"
SAVED_NOTICE_MS = 2000


def store_url(appid: int) -> str:
    """The Steam store page of an app."""
    return f"{STORE_URL}{appid}"


class OptionXWindow:
    """A window listing apps with editable launch options."""

    def __init__(self, root: tk.Misc, editor: Editor) -> None:
        self.root = root
        self.editor = editor
        self._row_widgets: list[tk.Widget] = []
        self._row_vars: list[tk.StringVar] = []
        root.title(TITLE)
        mono = tkfont.nametofont("TkFixedFont")

        outer = ttk.Frame(root, padding=8)
        outer.pack(fill=tk.BOTH, expand=True)

        find = ttk.Frame(outer)
        find.pack(fill=tk.X)
        ttk.Label(find, text="Find file:").pack(side=tk.LEFT)
        ttk.Label(find, text=CONFIG_HINT, font=mono).pack(side=tk.LEFT, padx=4)

        pick = ttk.Frame(outer)
        pick.pack(fill=tk.X, pady=(4, 0))
        ttk.Button(pick, text="Open file…", command=self._open_file).pack(side=tk.LEFT)
        self._picked_caption = ttk.Label(pick, text="Picked file:")
        self._picked_path = ttk.Label(pick, font=mono)

        self._body = ttk.Frame(outer)
        self._build_actions(self._body)
        self._build_sorting(self._body)
        self._build_table(self._body)

        self.refresh()

    def _build_actions(self, parent: ttk.Frame) -> None:
        ttk.Separator(parent).pack(fill=tk.X, pady=4)
        actions = ttk.Frame(parent)
        actions.pack(fill=tk.X)
        ttk.Button(actions, text="Save", command=self._save).pack(side=tk.LEFT)
        ttk.Button(actions, text="Clear", command=self._clear).pack(side=tk.LEFT, padx=4)
        ttk.Button(actions, text="Restore", command=self._restore).pack(side=tk.LEFT)
        self._status = ttk.Label(actions)
        self._status.pack(side=tk.LEFT, padx=4)
        ttk.Label(actions, text="Set default launch options:").pack(side=tk.LEFT, padx=(8, 4))
        self._default_var = tk.StringVar(value=self.editor.default_launch_options)
        self._default_var.trace_add("write", self._default_changed)
        ttk.Entry(actions, textvariable=self._default_var).pack(
            side=tk.LEFT, fill=tk.X, expand=True
        )

    def _build_sorting(self, parent: ttk.Frame) -> None:
        ttk.Separator(parent).pack(fill=tk.X, pady=4)
        sorting = ttk.Frame(parent)
        sorting.pack(fill=tk.X)
        self._sort_var = tk.StringVar(value=self.editor.app_sort.value)
        combo = ttk.Combobox(
            sorting,
            textvariable=self._sort_var,
            values=[sort.value for sort in AppSort],
            state="readonly",
            width=22,
        )
        combo.bind("<<ComboboxSelected>>", self._sort_changed)
        combo.pack(side=tk.LEFT)
        ttk.Label(sorting, text="Filter apps:").pack(side=tk.LEFT, padx=(8, 4))
        self._filter_var = tk.StringVar(value=self.editor.filter_apps)
        self._filter_var.trace_add("write", self._filter_changed)
        ttk.Entry(sorting, textvariable=self._filter_var).pack(
            side=tk.LEFT, fill=tk.X, expand=True
        )

    def _build_table(self, parent: ttk.Frame) -> None:
        ttk.Separator(parent).pack(fill=tk.X, pady=4)
        table = ttk.Frame(parent)
        table.pack(fill=tk.BOTH, expand=True)
        self._canvas = tk.Canvas(table, highlightthickness=0)
        scroll = ttk.Scrollbar(table, orient=tk.VERTICAL, command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=scroll.set)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self._canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self._rows = ttk.Frame(self._canvas)
        self._rows.columnconfigure(1, weight=1)
        window = self._canvas.create_window((0, 0), window=self._rows, anchor="nw")
        self._rows.bind(
            "<Configure>",
            lambda _event: self._canvas.configure(scrollregion=self._canvas.bbox("all")),
        )
        self._canvas.bind(
            "<Configure>",
            lambda event: self._canvas.itemconfigure(window, width=event.width),
        )

        heading = tkfont.nametofont("TkHeadingFont")
        ttk.Label(self._rows, text="Apps", font=heading).grid(
            row=0, column=0, sticky=tk.W, padx=(0, 8)
        )
        ttk.Label(self._rows, text="Launch Options", font=heading).grid(
            row=0, column=1, sticky=tk.W
        )

    def refresh(self) -> None:
        """Bring every part of the window in line with the editor."""
        if self.editor.steam_config is None:
            self._picked_caption.pack_forget()
            self._picked_path.pack_forget()
            self._body.pack_forget()
            return
        self._picked_path.configure(text=self.editor.steam_config)
        self._picked_caption.pack(side=tk.LEFT, padx=(8, 4))
        self._picked_path.pack(side=tk.LEFT)
        self._body.pack(fill=tk.BOTH, expand=True)
        if self._default_var.get() != self.editor.default_launch_options:
            self._default_var.set(self.editor.default_launch_options)
        self._sort_var.set(self.editor.app_sort.value)
        self._rebuild_rows()

    def _rebuild_rows(self) -> None:
        for widget in self._row_widgets:
            widget.destroy()
        self._row_widgets.clear()
        self._row_vars.clear()
        for row, (appid, app) in enumerate(self.editor.visible_apps(), start=1):
            link = ttk.Label(
                self._rows, text=app.name, foreground="blue", cursor="hand2", width=30
            )
            link.bind("<Button-1>", lambda _event, url=store_url(appid): self._copy_link(url))
            var = tk.StringVar(value=self.editor.launch_options_for(appid))
            var.trace_add(
                "write",
                lambda *_args, appid=appid, var=var: self.editor.set_launch_options(
                    appid, var.get()
                ),
            )
            entry = ttk.Entry(self._rows, textvariable=var)
            link.grid(row=row, column=0, sticky=tk.W, padx=(0, 8), pady=1)
            entry.grid(row=row, column=1, sticky=tk.EW, pady=1)
            self._row_widgets.extend((link, entry))
            self._row_vars.append(var)

    def _copy_link(self, url: str) -> None:
        self.root.clipboard_clear()
        self.root.clipboard_append(url)
        self._notify(f"Copied {url}")

    def _notify(self, text: str) -> None:
        self._status.configure(text=text)
        self.root.after(SAVED_NOTICE_MS, lambda: self._status.configure(text=""))

    def _open_file(self) -> None:
        path = filedialog.askopenfilename(
            parent=self.root,
            filetypes=[("text", "*.vdf")],
            initialdir=str(userdata_dir()),
        )
        if path:
            self.editor.open_file(path)
            self.refresh()

    def _save(self) -> None:
        self.editor.save()
        self._notify("Configs saved")
        self._rebuild_rows()

    def _clear(self) -> None:
        self.editor.clear()
        self._rebuild_rows()

    def _restore(self) -> None:
        self.editor.restore()
        self._rebuild_rows()

    def _default_changed(self, *_args: object) -> None:
        self.editor.default_launch_options = self._default_var.get()

    def _sort_changed(self, _event: object) -> None:
        self.editor.app_sort = AppSort.from_label(self._sort_var.get())
        self._rebuild_rows()

    def _filter_changed(self, *_args: object) -> None:
        self.editor.filter_apps = self._filter_var.get()
        self._rebuild_rows()


def main(argv: list[str] | None = None) -> int:
    """Fetch app names, load the settings and run the window."""
    parser = argparse.ArgumentParser(
        prog="steam-optionx",
        description="Modify app launch options in Steam's config file.",
    )
    parser.parse_args(argv)
    try:
        names = api.app_names()
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Error getting Steam apps from Steam API: {exc}") from exc

    config = load_config()
    app_sort = (
        AppSort.from_label(config.app_sort)
        if config.app_sort is not None
        else AppSort.ID_ASCENDING
    )
    editor = Editor(names, config.steam_config, config.default_launch_options, app_sort, None)
    root = tk.Tk()
    OptionXWindow(root, editor)
    root.mainloop()
    return 0