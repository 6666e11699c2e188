"""
Main NiceGUI application for the graph editor.

Each browser tab gets its own editing surface: a Graph, the
InteractionController driving it, and an interactive image whose SVG
overlay is re-rendered on every redraw request.

Mouse:
- left click on empty canvas: new node
- left drag on a node: move it
- right click on a node / edge: delete it
- right drag from a node to another node: connect them
"""

import logging
import sys
from typing import Tuple

from dotenv import load_dotenv
from nicegui import ui

load_dotenv()

from grapheditor.config import EditorConfig, get_editor_config
from grapheditor.edit.controller import InteractionController
from grapheditor.edit.handlers import MOUSE_EVENTS, setup_edit_handlers
from grapheditor.graph import Graph
from grapheditor.render import SceneRenderer, SvgSurface

config = get_editor_config()

logging.basicConfig(
    level=config.log_level.upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


def build_editor(config: EditorConfig) -> Tuple[Graph, InteractionController, SceneRenderer, SvgSurface]:
    """Create the model, controller and rendering pieces for one surface."""
    graph = Graph(attraction_radius=config.attraction_radius,
                  edge_tolerance=config.edge_tolerance)
    if config.seed_demo:
        graph.seed_demo()

    controller = InteractionController(graph, drag_threshold=config.drag_threshold)
    renderer = SceneRenderer()
    surface = SvgSurface(
        width=config.canvas_width,
        height=config.canvas_height,
        node_radius=config.node_radius,
        edge_end_gap=config.edge_end_gap,
        dot_radius=config.dot_radius,
    )
    return graph, controller, renderer, surface


@ui.page('/')
def index():
    graph, controller, renderer, surface = build_editor(config)

    handlers = setup_edit_handlers(
        controller=controller,
        renderer=renderer,
        surface=surface,
        set_content=lambda content: image.set_content(content),
    )

    ui.label('Left: add / move node · Right: delete · Right-drag: connect').classes('text-sm text-gray-500')

    image = ui.interactive_image(
        size=(config.canvas_width, config.canvas_height),
        on_mouse=handlers['handle_mouse'],
        events=MOUSE_EVENTS,
        cross=False,
    )
    # Secondary button is ours, not the browser's
    image.on('contextmenu.prevent', lambda _: None)

    handlers['redraw']()
    logger.info(f"Editor surface ready ({len(graph)} nodes)")


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Graph Editor',
        port=8081,
        reload=not getattr(sys, 'frozen', False),
    )
