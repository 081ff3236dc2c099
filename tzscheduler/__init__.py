"""Owner-scoped schedules with participants and suggested meeting windows."""

__version__ = "1.0.0"
