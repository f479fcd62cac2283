"""Wellness backend: daily happiness scoring over mood, activity, goal and habit logs."""

__version__ = "1.0.0"
