"""
Graph model for the editor.

The Graph owns every Node in an insertion-ordered arena keyed by node id.
Adjacency lives on the nodes as ordered lists of target ids, and hover
state is kept as ids too, so nothing outside the arena holds a Node
that could outlive its deletion.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx

from grapheditor.constants import ATTRACTION_RADIUS, EDGE_TOLERANCE
from grapheditor.geometry import Point, point_near_segment, squared_distance

logger = logging.getLogger(__name__)

DEMO_POSITIONS = [(100, 100), (200, 100), (150, 150)]


class Node:
    """A graph vertex: position, display label and outgoing edges."""

    def __init__(self, node_id: int, position: Point, label: str):
        self.id = node_id
        self.position = position
        self.label = label
        self.outgoing: List[int] = []

    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label!r}, position={self.position})"

    def add_outgoing(self, other: "Node") -> bool:
        """
        Add an edge from this node to `other`.

        Rejects self-loops, duplicates and the reverse of an existing edge.
        Returns True if the edge was added.
        """
        if other is self or other.id == self.id:
            return False
        if other.id in self.outgoing:
            return False
        if self.id in other.outgoing:
            return False
        self.outgoing.append(other.id)
        return True

    def remove_outgoing(self, other: "Node") -> None:
        if other.id in self.outgoing:
            self.outgoing.remove(other.id)

    def hit_test(self, point: Point, radius: int = ATTRACTION_RADIUS) -> bool:
        dx = self.position[0] - point[0]
        dy = self.position[1] - point[1]
        return squared_distance(dx, dy) < radius * radius


class Graph:
    """
    All nodes of one editing surface plus the hover highlight.

    Node order is draw order and hit-test priority: on overlap the node
    created first wins.
    """

    def __init__(self, attraction_radius: int = ATTRACTION_RADIUS,
                 edge_tolerance: float = EDGE_TOLERANCE):
        self.attraction_radius = attraction_radius
        self.edge_tolerance = edge_tolerance
        self._nodes: Dict[int, Node] = {}
        self._label_counter = 0
        # hover_edge_target set implies hover_node is the edge's source
        self.hover_node: Optional[int] = None
        self.hover_edge_target: Optional[int] = None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __contains__(self, node: Node) -> bool:
        return self._nodes.get(node.id) is node

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def label_counter(self) -> int:
        return self._label_counter

    def node(self, node_id: Optional[int]) -> Optional[Node]:
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def edges(self) -> List[Tuple[Node, Node]]:
        """All edges as (source, target) pairs in draw order."""
        return [(source, self._nodes[target_id])
                for source in self._nodes.values()
                for target_id in source.outgoing]

    # --- Queries ---

    def vertex_at(self, point: Point) -> Optional[Node]:
        """Return the first node whose attraction zone contains `point`."""
        for node in self._nodes.values():
            if node.hit_test(point, self.attraction_radius):
                return node
        return None

    def edge_at(self, point: Point) -> Tuple[Optional[Node], Optional[Node]]:
        """Return the first (source, target) edge under `point`, or (None, None)."""
        for source in self._nodes.values():
            for target_id in source.outgoing:
                target = self._nodes[target_id]
                if point_near_segment(point, source.position, target.position,
                                      self.edge_tolerance):
                    return source, target
        return None, None

    def hovered_node(self) -> Optional[Node]:
        """The highlighted vertex, if a vertex (not an edge) is highlighted."""
        if self.hover_edge_target is not None:
            return None
        return self.node(self.hover_node)

    def hovered_edge(self) -> Optional[Tuple[Node, Node]]:
        if self.hover_edge_target is None:
            return None
        source = self.node(self.hover_node)
        target = self.node(self.hover_edge_target)
        if source is None or target is None:
            return None
        return source, target

    # --- Mutations ---

    def add_node(self, point: Point) -> Node:
        self._label_counter += 1
        node = Node(self._label_counter, tuple(point), str(self._label_counter))
        self._nodes[node.id] = node
        logger.debug(f"Added node {node.label} at {node.position}")
        return node

    def add_edge(self, source: Node, target: Node) -> bool:
        if source not in self or target not in self:
            logger.debug(f"Rejected edge {source.label} -> {target.label}: node not in graph")
            return False
        added = source.add_outgoing(target)
        if added:
            logger.debug(f"Added edge {source.label} -> {target.label}")
        else:
            logger.debug(f"Rejected edge {source.label} -> {target.label}")
        return added

    def delete_node(self, node: Node) -> None:
        """Remove a node together with every edge that touches it."""
        if node not in self:
            return
        del self._nodes[node.id]
        for other in self._nodes.values():
            other.remove_outgoing(node)
        if node.id in (self.hover_node, self.hover_edge_target):
            self.clear_hover()
        logger.debug(f"Deleted node {node.label}")

    def delete_edge(self, source: Node, target: Node) -> None:
        if source not in self or target.id not in source.outgoing:
            return
        source.remove_outgoing(target)
        if (self.hover_node, self.hover_edge_target) == (source.id, target.id):
            self.clear_hover()
        logger.debug(f"Deleted edge {source.label} -> {target.label}")

    def move_node(self, node: Node, point: Point) -> None:
        node.position = tuple(point)

    # --- Hover ---

    def clear_hover(self) -> None:
        self.hover_node = None
        self.hover_edge_target = None

    def update_hover(self, point: Point) -> bool:
        """
        Recompute what is under the pointer.

        Returns True if the highlight changed and the surface needs a redraw.
        """
        current = self.hovered_node()
        if current is not None and current.hit_test(point, self.attraction_radius):
            return False

        node = self.vertex_at(point)
        if node is not None:
            self.hover_node = node.id
            self.hover_edge_target = None
            return True

        source, target = self.edge_at(point)
        if source is not None:
            if (self.hover_node, self.hover_edge_target) == (source.id, target.id):
                return False
            self.hover_node = source.id
            self.hover_edge_target = target.id
            return True

        if self.hover_node is None and self.hover_edge_target is None:
            return False
        self.clear_hover()
        return True

    # --- Readers ---

    def snapshot(self) -> nx.DiGraph:
        """
        Copy the current state into a networkx DiGraph for readers.

        Node attributes: label, position, order. Graph attributes:
        hover_node (vertex highlight only) and hover_edge (source, target).
        """
        G = nx.DiGraph()
        for order, node in enumerate(self._nodes.values()):
            G.add_node(node.id, label=node.label, position=node.position, order=order)
        for source, target in self.edges():
            G.add_edge(source.id, target.id)

        hovered = self.hovered_node()
        edge = self.hovered_edge()
        G.graph["hover_node"] = hovered.id if hovered else None
        G.graph["hover_edge"] = (edge[0].id, edge[1].id) if edge else None
        return G

    def seed_demo(self) -> List[Node]:
        """Add the demo triangle 1 -> 2 -> 3 -> 1 and return its nodes."""
        nodes = [self.add_node(p) for p in DEMO_POSITIONS]
        for source, target in zip(nodes, nodes[1:] + nodes[:1]):
            self.add_edge(source, target)
        logger.info(f"Seeded demo graph with {len(nodes)} nodes")
        return nodes
