"""
Edit Handlers - pointer event wiring between NiceGUI and the controller.

The interactive image reports DOM mouse events in image coordinates.
This module translates them into InteractionController calls and
re-renders the SVG overlay whenever the controller asks for a redraw.
"""

import logging
from typing import Any, Callable, Dict, Optional

from nicegui.events import MouseEventArguments

from grapheditor.edit.controller import InteractionController
from grapheditor.geometry import Point
from grapheditor.render import SceneRenderer, SvgSurface

logger = logging.getLogger(__name__)

# DOM MouseEvent.button values
PRIMARY_BUTTON = 0
SECONDARY_BUTTON = 2

MOUSE_EVENTS = ['mousedown', 'mousemove', 'mouseup', 'mouseleave']


def event_point(event: Any) -> Optional[Point]:
    """Extract integer canvas coordinates from a mouse event, or None."""
    x = getattr(event, 'image_x', None)
    y = getattr(event, 'image_y', None)
    if x is None or y is None:
        return None
    try:
        return (int(round(x)), int(round(y)))
    except (TypeError, ValueError):
        return None


def setup_edit_handlers(
    controller: InteractionController,
    renderer: SceneRenderer,
    surface: SvgSurface,
    set_content: Callable[[str], None],
) -> Dict[str, Callable]:
    """
    Set up the editing surface event handlers.

    Args:
        controller: InteractionController owning the Graph
        renderer: SceneRenderer issuing draw calls
        surface: SvgSurface collecting the SVG markup
        set_content: Pushes SVG markup into the UI (e.g. interactive_image.set_content)

    Returns:
        Dict with handler functions for binding to UI events
    """

    def redraw():
        """Render the current graph and hand the markup to the UI."""
        renderer.draw(controller.graph, surface, controller.preview_edge())
        set_content(surface.content)

    controller.set_request_redraw(redraw)

    def handle_mouse(event: MouseEventArguments):
        """Dispatch one interactive_image mouse event."""
        event_type = getattr(event, 'type', None)

        if event_type == 'mouseleave':
            controller.lose_capture()
            return

        point = event_point(event)
        if point is None:
            logger.warning(f"Dropping {event_type} event without coordinates")
            return

        if event_type == 'mousemove':
            controller.on_move(point)
            return

        button = getattr(event, 'button', None)
        if event_type == 'mousedown':
            if button == PRIMARY_BUTTON:
                controller.on_primary_down(point)
            elif button == SECONDARY_BUTTON:
                controller.on_secondary_down(point)
            else:
                logger.debug(f"Ignoring press of mouse button {button}")
        elif event_type == 'mouseup':
            if button == PRIMARY_BUTTON:
                controller.on_primary_up(point)
            elif button == SECONDARY_BUTTON:
                controller.on_secondary_up(point)
            else:
                logger.debug(f"Ignoring release of mouse button {button}")
        else:
            logger.debug(f"Ignoring unexpected mouse event {event_type!r}")

    return {
        'handle_mouse': handle_mouse,
        'redraw': redraw,
    }
