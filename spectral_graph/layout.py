"""Map externally computed coordinates onto the selection and re-draw the graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Tuple

import numpy as np

from .config import ExtractionConfig, get_extraction_config
from .document import Document, Matrix, Page, Rect, Vector, straight_segment
from .graph import Edge, Vertex, is_vertex_object

logger = logging.getLogger(__name__)

Anchor = Literal["top_left", "center"]


@dataclass
class LayoutOptions:
    """Configuration for applying a spectral layout."""

    # point of each vertex box that is moved onto its mapped position
    anchor: Anchor = "top_left"
    label: str = "Spectral Layout"


@dataclass(frozen=True)
class AxisFit:
    """Affine map ``screen = base + step * raw`` for one axis."""

    base: float
    step: float

    def __call__(self, raw):
        return self.base + self.step * raw


def fit_axis(values: Sequence[float], low: float, high: float) -> AxisFit:
    """Stretch the range of ``values`` onto ``[low, high]``.

    The largest value lands on ``high``.  When all values coincide the axis
    collapses onto the middle of the interval.
    """

    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return AxisFit(base=(low + high) * 0.5, step=0.0)
    max_value = float(arr.max())
    min_value = float(arr.min())
    span = max_value - min_value
    if span == 0.0:
        logger.warning(
            "All coordinates equal %.6g on this axis; centering vertices", max_value
        )
        return AxisFit(base=(low + high) * 0.5, step=0.0)
    step = (high - low) / span
    return AxisFit(base=high - max_value * step, step=step)


def mapped_positions(ex: Sequence[float], ey: Sequence[float], box: Rect) -> List[Vector]:
    """Return the page position of every vertex, in vertex order."""

    if len(ex) == 0:
        return []
    fx = fit_axis(ex, box.left(), box.right())
    fy = fit_axis(ey, box.bottom(), box.top())
    xs = fx(np.asarray(ex, dtype=float))
    ys = fy(np.asarray(ey, dtype=float))
    return [Vector(float(x), float(y)) for x, y in zip(xs, ys)]


def selection_bbox(page: Page, config: Optional[ExtractionConfig] = None) -> Rect:
    """Union of the (unpadded) boxes of the selected vertex objects."""

    config = config or get_extraction_config()
    box = Rect()
    for i, obj, selected in page.objects():
        if selected and is_vertex_object(obj, config):
            box.add(page.bbox(i))
    return box


def _anchor_point(box: Rect, anchor: Anchor) -> Vector:
    if anchor == "center":
        return box.center()
    return box.top_left()


def apply_layout(
    page: Page,
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    positions: Sequence[Vector],
    anchor: Anchor = "top_left",
) -> None:
    """Move every vertex onto its position and straighten every edge."""

    for vertex in vertices:
        target = positions[vertex.index - 1]
        delta = target - _anchor_point(page.bbox(vertex.obj), anchor)
        page.transform(vertex.obj, Matrix.translation(delta))

    for edge in edges:
        tail = positions[edge.tail.index - 1]
        head = positions[edge.head.index - 1]
        page.set_shape(edge.obj, straight_segment(tail, head))
        page.set_matrix(edge.obj, Matrix())


@dataclass(frozen=True)
class LayoutTransaction:
    """Undoable record of one spectral layout applied to page ``pno``."""

    label: str
    pno: int
    vertices: Tuple[Vertex, ...]
    edges: Tuple[Edge, ...]
    ex: Tuple[float, ...]
    ey: Tuple[float, ...]
    selection_bbox: Rect
    original: Page
    options: LayoutOptions = field(default_factory=LayoutOptions)

    def positions(self) -> List[Vector]:
        return mapped_positions(self.ex, self.ey, self.selection_bbox)

    def redo(self, document: Document) -> None:
        page = document[self.pno]
        apply_layout(page, self.vertices, self.edges, self.positions(), self.options.anchor)
        logger.info(
            "Applied %s to page %d: %d vertex(es), %d edge(s)",
            self.label,
            self.pno,
            len(self.vertices),
            len(self.edges),
        )

    def undo(self, document: Document) -> None:
        document[self.pno] = self.original.clone()
        logger.info("Reverted %s on page %d", self.label, self.pno)


def build_layout_transaction(
    page: Page,
    pno: int,
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    ex: Sequence[float],
    ey: Sequence[float],
    options: Optional[LayoutOptions] = None,
    config: Optional[ExtractionConfig] = None,
) -> LayoutTransaction:
    if len(ex) != len(vertices) or len(ey) != len(vertices):
        raise ValueError(
            f"expected {len(vertices)} coordinate pair(s), got {len(ex)} x and {len(ey)} y"
        )
    options = options or LayoutOptions()
    return LayoutTransaction(
        label=options.label,
        pno=pno,
        vertices=tuple(vertices),
        edges=tuple(edges),
        ex=tuple(float(x) for x in ex),
        ey=tuple(float(y) for y in ey),
        selection_bbox=selection_bbox(page, config),
        original=page.clone(),
        options=options,
    )


__all__ = [
    "Anchor",
    "LayoutOptions",
    "AxisFit",
    "fit_axis",
    "mapped_positions",
    "selection_bbox",
    "apply_layout",
    "LayoutTransaction",
    "build_layout_transaction",
]
