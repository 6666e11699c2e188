"""
Interaction Controller - turns pointer events into graph edits.

Primary button:   click on empty canvas creates a node,
                  press on a node and drag moves it.
Secondary button: click on a node deletes it, click on an edge deletes
                  the edge, press on a node and drag to another node
                  connects them.

A press on a node captures the pointer for that button. While captured,
move and release events belong to the capture session; everything else
(including the other button) is ignored until the session ends.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from grapheditor.constants import DRAG_THRESHOLD
from grapheditor.geometry import Point, squared_distance
from grapheditor.graph import Graph, Node

logger = logging.getLogger(__name__)


class Button(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class EditState:
    """Immutable snapshot of the current capture session."""
    capture: Optional[Button] = None
    anchor_id: Optional[int] = None
    dragging: bool = False
    pointer: Optional[Point] = None


class InteractionController:
    """State machine between raw pointer input and the Graph."""

    def __init__(self, graph: Graph,
                 request_redraw: Optional[Callable[[], None]] = None,
                 drag_threshold: int = DRAG_THRESHOLD):
        self.graph = graph
        self.drag_threshold = drag_threshold
        self._request_redraw = request_redraw
        self._state = EditState()

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_capturing(self) -> bool:
        return self._state.capture is not None

    def set_request_redraw(self, callback: Callable[[], None]):
        self._request_redraw = callback

    def anchor(self) -> Optional[Node]:
        return self.graph.node(self._state.anchor_id)

    def preview_edge(self) -> Optional[Tuple[Point, Point]]:
        """Rubber-band segment from the anchor to the pointer while connecting."""
        state = self._state
        if state.capture is not Button.SECONDARY or not state.dragging:
            return None
        anchor = self.anchor()
        if anchor is None or state.pointer is None:
            return None
        return anchor.position, state.pointer

    # --- Primary button ---

    def on_primary_down(self, point: Point):
        if self.is_capturing:
            return
        anchor = self.graph.vertex_at(point)
        if anchor is None:
            self.graph.add_node(point)
            self._redraw()
            return
        self._state = EditState(capture=Button.PRIMARY, anchor_id=anchor.id, pointer=point)

    def on_primary_up(self, point: Point):
        if self._state.capture is not Button.PRIMARY:
            return
        self._state = EditState(pointer=point)
        self._redraw()

    # --- Secondary button ---

    def on_secondary_down(self, point: Point):
        if self.is_capturing:
            return
        anchor = self.graph.vertex_at(point)
        if anchor is not None:
            self._state = EditState(capture=Button.SECONDARY, anchor_id=anchor.id, pointer=point)
            self._redraw()
            return
        source, target = self.graph.edge_at(point)
        if source is not None and target is not None:
            self.graph.delete_edge(source, target)
            self._redraw()

    def on_secondary_up(self, point: Point):
        if self._state.capture is not Button.SECONDARY:
            return
        anchor = self.anchor()
        dragging = self._state.dragging
        self._state = EditState(pointer=point)

        if dragging:
            target = self.graph.vertex_at(point)
            if anchor is not None and target is not None:
                self.graph.add_edge(anchor, target)
        elif anchor is not None:
            self.graph.delete_node(anchor)
        self._redraw()

    # --- Movement ---

    def on_move(self, point: Point):
        state = self._state
        if state.capture is None:
            if self.graph.update_hover(point):
                self._redraw()
            return

        anchor = self.anchor()
        if anchor is None:
            # Anchor disappeared under us; nothing left to drag
            self._state = EditState(capture=state.capture, pointer=point)
            return

        dragging = state.dragging
        if not dragging:
            dx = point[0] - anchor.position[0]
            dy = point[1] - anchor.position[1]
            dragging = squared_distance(dx, dy) > self.drag_threshold * self.drag_threshold
        self._state = EditState(capture=state.capture, anchor_id=anchor.id,
                                dragging=dragging, pointer=point)

        if dragging and state.capture is Button.PRIMARY:
            self.graph.move_node(anchor, point)
        self._redraw()

    def lose_capture(self):
        """Drop the session when capture is taken away (pointer left, focus lost)."""
        if not self.is_capturing:
            return
        logger.debug(f"Capture lost during {self._state.capture.value} session")
        self._state = EditState(pointer=self._state.pointer)
        self._redraw()

    def _redraw(self):
        if self._request_redraw:
            self._request_redraw()
