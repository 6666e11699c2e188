"""
Scene rendering for the graph editor.

The core never touches a drawing API directly. SceneRenderer walks a
networkx snapshot of the Graph and issues draw calls against anything that
implements the RenderSurface protocol. SvgSurface is the surface used by
the NiceGUI app: it collects SVG elements that are pushed into an
interactive image as its overlay content.

Draw order:
  1. background
  2. all nodes (vertex highlight only when no edge is highlighted)
  3. all edges, in node order then outgoing order
  4. the rubber-band preview edge, if any
"""

from html import escape
from typing import List, Optional, Protocol, Tuple, runtime_checkable

import networkx as nx

from grapheditor.constants import (
    BACKGROUND_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DOT_RADIUS,
    EDGE_END_GAP,
    HOVER_COLOR,
    NODE_RADIUS,
    NORMAL_COLOR,
    STROKE_WIDTH,
)
from grapheditor.geometry import Point, circle_segment_trim
from grapheditor.graph import Graph


@runtime_checkable
class RenderSurface(Protocol):
    """Minimal drawing interface the editor core renders through."""

    def clear(self, background: str) -> None:
        """Fill the whole surface with the background colour."""
        ...

    def draw_node(self, position: Point, label: str, highlighted: bool) -> None:
        """Draw a labelled node circle centred on `position`."""
        ...

    def draw_edge(self, start: Point, finish: Point, highlighted: bool, exact: bool) -> None:
        """
        Draw an edge from `start` to `finish`.

        With exact=True the finish end is not pulled back to a node
        boundary (used for the preview that follows the pointer).
        """
        ...


class SceneRenderer:
    """Issue draw calls for one frame of the editor."""

    def __init__(self, background: str = BACKGROUND_COLOR):
        self.background = background

    def draw(self, graph: Graph, surface: RenderSurface,
             preview: Optional[Tuple[Point, Point]] = None) -> None:
        self.draw_snapshot(graph.snapshot(), surface, preview)

    def draw_snapshot(self, G: nx.DiGraph, surface: RenderSurface,
                      preview: Optional[Tuple[Point, Point]] = None) -> None:
        surface.clear(self.background)

        hover_node = G.graph.get("hover_node")
        hover_edge = G.graph.get("hover_edge")

        for n, attrs in G.nodes(data=True):
            surface.draw_node(attrs["position"], attrs["label"], n == hover_node)

        for src in G.nodes:
            for tgt in G.successors(src):
                surface.draw_edge(
                    G.nodes[src]["position"],
                    G.nodes[tgt]["position"],
                    (src, tgt) == hover_edge,
                    False,
                )

        if preview is not None:
            surface.draw_edge(preview[0], preview[1], False, True)


class SvgSurface:
    """
    RenderSurface that accumulates SVG markup.

    Edges are clipped so they start on the source circle and stop just
    short of the target circle, leaving room for the terminal dot.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 node_radius: int = NODE_RADIUS, edge_end_gap: int = EDGE_END_GAP,
                 dot_radius: int = DOT_RADIUS,
                 normal_color: str = NORMAL_COLOR, hover_color: str = HOVER_COLOR):
        self.width = width
        self.height = height
        self.node_radius = node_radius
        self.edge_end_gap = edge_end_gap
        self.dot_radius = dot_radius
        self.normal_color = normal_color
        self.hover_color = hover_color
        self._elements: List[str] = []

    @property
    def content(self) -> str:
        return "\n".join(self._elements)

    def to_svg(self) -> str:
        """Standalone SVG document for the current frame."""
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="0 0 {self.width} {self.height}">\n'
            f'{self.content}\n</svg>'
        )

    def _pen(self, highlighted: bool) -> str:
        return self.hover_color if highlighted else self.normal_color

    def clear(self, background: str) -> None:
        self._elements = [
            f'<rect x="0" y="0" width="{self.width}" height="{self.height}" fill="{background}" />'
        ]

    def draw_node(self, position: Point, label: str, highlighted: bool) -> None:
        x, y = position
        pen = self._pen(highlighted)
        self._elements.append(
            f'<circle cx="{x}" cy="{y}" r="{self.node_radius}" fill="white" '
            f'stroke="{pen}" stroke-width="{STROKE_WIDTH}" />'
        )
        self._elements.append(
            f'<text x="{x}" y="{y}" text-anchor="middle" dominant-baseline="central" '
            f'font-size="{self.node_radius}" font-family="sans-serif">{escape(label)}</text>'
        )

    def draw_edge(self, start: Point, finish: Point, highlighted: bool, exact: bool) -> None:
        start = circle_segment_trim(finish, start, self.node_radius)
        if not exact:
            finish = circle_segment_trim(start, finish, self.node_radius + self.edge_end_gap)
        pen = self._pen(highlighted)
        self._elements.append(
            f'<line x1="{start[0]}" y1="{start[1]}" x2="{finish[0]}" y2="{finish[1]}" '
            f'stroke="{pen}" stroke-width="{STROKE_WIDTH}" />'
        )
        # Dot marks the target end
        self._elements.append(
            f'<circle cx="{finish[0]}" cy="{finish[1]}" r="{self.dot_radius}" fill="white" '
            f'stroke="{pen}" stroke-width="{STROKE_WIDTH}" />'
        )
