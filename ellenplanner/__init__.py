"""ellenplanner - booking scheduler for agency resource planning."""

__version__ = "0.1.0"
