"""Extract a graph (vertices and edges) from the selected objects of a page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import ExtractionConfig, get_extraction_config
from .document import Curve, Matrix, Page, PageObject, Rect, Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vertex:
    """A selected object acting as a graph node."""

    name: str
    obj: int
    bbox: Rect
    pos: Vector
    index: int


@dataclass(frozen=True)
class Edge:
    head: Vertex
    tail: Vertex
    obj: int


def is_vertex_object(obj: PageObject, config: ExtractionConfig) -> bool:
    return obj.type in config.vertex_types


def edge_curve(obj: PageObject) -> Optional[Curve]:
    """Return the single open curve of an edge candidate, or ``None``."""

    if obj.type != "path" or len(obj.shape) != 1:
        return None
    subpath = obj.shape[0]
    if not isinstance(subpath, Curve) or subpath.closed or not subpath.segments:
        return None
    return subpath


def find_vertex(point: Vector, vertices: Sequence[Vertex]) -> Optional[Vertex]:
    """Return the first vertex whose padded box contains ``point``.

    Vertices are scanned in extraction order, so when padded boxes overlap
    the earlier vertex wins.  ``None`` means no vertex contains the point.
    """

    for vertex in vertices:
        if vertex.bbox.contains(point):
            return vertex
    return None


def edge_endpoints(curve: Curve, matrix: Matrix) -> Tuple[Vector, Vector]:
    """Return ``(tail, head)`` of ``curve`` in page coordinates."""

    return matrix * curve.first_point(), matrix * curve.last_point()


def collect_vertices(page: Page, config: ExtractionConfig) -> List[Vertex]:
    vertices: List[Vertex] = []
    for i, obj, selected in page.objects():
        if not selected or not is_vertex_object(obj, config):
            continue
        box = page.bbox(i)
        if box.is_empty():
            logger.debug("Skipping vertex candidate %d with empty bounding box", i)
            continue
        padded = box.expanded(config.vertex_margin)
        vertices.append(
            Vertex(
                name=f"v{i}",
                obj=i,
                bbox=padded,
                pos=padded.center(),
                index=len(vertices) + 1,
            )
        )
    return vertices


def collect_edges(page: Page, vertices: Sequence[Vertex]) -> List[Edge]:
    edges: List[Edge] = []
    for i, obj, selected in page.objects():
        if not selected:
            continue
        curve = edge_curve(obj)
        if curve is None:
            continue
        tail_point, head_point = edge_endpoints(curve, obj.matrix)
        tail = find_vertex(tail_point, vertices)
        head = find_vertex(head_point, vertices)
        if head is None or tail is None:
            logger.debug(
                "Dropping edge %d: unresolved endpoint (tail=%s, head=%s)",
                i,
                tail.name if tail else None,
                head.name if head else None,
            )
            continue
        edges.append(Edge(head=head, tail=tail, obj=i))
    return edges


def collect_graph(
    page: Page, config: Optional[ExtractionConfig] = None
) -> Tuple[List[Vertex], List[Edge]]:
    """Create the vertex and edge lists of the current selection."""

    config = config or get_extraction_config()
    vertices = collect_vertices(page, config)
    edges = collect_edges(page, vertices)
    logger.info("Collected graph: %d vertex(es), %d edge(s)", len(vertices), len(edges))
    return vertices, edges


__all__ = [
    "Vertex",
    "Edge",
    "is_vertex_object",
    "edge_curve",
    "find_vertex",
    "edge_endpoints",
    "collect_vertices",
    "collect_edges",
    "collect_graph",
]
