"""Student task and deadline organiser with a staging queue, an interactive menu and a plain-text store."""

__version__ = "1.0.0"