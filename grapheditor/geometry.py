"""
Geometry helpers for hit testing and edge clipping.

Points are plain (x, y) tuples in canvas pixels. Python integers never
overflow, so squared distances stay exact for any canvas size.
"""

import math
from typing import Tuple

from grapheditor.constants import EDGE_TOLERANCE

Point = Tuple[int, int]


def squared_distance(dx: float, dy: float) -> float:
    """Return dx*dx + dy*dy."""
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    return math.sqrt(squared_distance(b[0] - a[0], b[1] - a[1]))


def point_near_segment(point: Point, start: Point, finish: Point,
                       tolerance: float = EDGE_TOLERANCE) -> bool:
    """
    Check whether a point lies on the segment start-finish.

    Compares the sum of the distances to both endpoints with the segment
    length: points on the segment make the two equal, nearby points exceed
    it slightly. The accepted zone is a thin ellipse with the endpoints as
    foci, so it is a little more permissive around the ends.

    A zero-length segment never matches.
    """
    if start == finish:
        return False
    length = distance(start, finish)
    total = distance(point, start) + distance(point, finish)
    return abs(total - length) < tolerance


def circle_segment_trim(anchor: Point, moving: Point, radius: int) -> Point:
    """
    Pull `moving` back toward `anchor` by `radius` along the segment.

    Used when drawing so that edges stop at a node's circle instead of
    running into its centre. Offsets are truncated to whole pixels.
    """
    dx = moving[0] - anchor[0]
    dy = moving[1] - anchor[1]
    x, y = moving
    if dx != 0:
        q = int(math.sqrt(squared_distance(dx, dy)))
        x -= int(radius * dx / q)
        y -= int(radius * dy / q)
    elif dy > 0:
        y -= radius
    else:
        y += radius
    return (x, y)
