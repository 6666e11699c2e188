"""
Pointer editing for the graph editor.

This package provides:
- InteractionController: capture/drag state machine driving Graph edits
- setup_edit_handlers: NiceGUI mouse event wiring and redraw

Usage:
    from grapheditor.edit import InteractionController
    from grapheditor.edit.handlers import setup_edit_handlers
"""

from grapheditor.constants import (
    ATTRACTION_RADIUS,
    EDGE_TOLERANCE,
    DRAG_THRESHOLD,
)
from grapheditor.edit.controller import Button, EditState, InteractionController
from grapheditor.edit.handlers import setup_edit_handlers

__all__ = [
    'Button',
    'EditState',
    'InteractionController',
    'setup_edit_handlers',
    'ATTRACTION_RADIUS',
    'EDGE_TOLERANCE',
    'DRAG_THRESHOLD',
]
