"""termclock - terminal clock dashboard with thermometer and todo list."""

__version__ = "0.1.0"
