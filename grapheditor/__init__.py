"""Interactive 2D graph editor."""

__version__ = "0.1.0"
