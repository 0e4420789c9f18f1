"""Edit app launch options stored in Steam's localconfig.vdf, with a Tkinter window."""

__version__ = "0.3.1"
__all__ = ["api", "apps", "config", "editor", "gui", "vdf"]