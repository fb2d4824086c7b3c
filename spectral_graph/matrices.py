"""Graph matrices (adjacency, degree, Laplacian) for an extracted graph."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from .config import ExtractionConfig
from .document import Page
from .graph import Edge, Vertex, collect_graph

logger = logging.getLogger(__name__)


class MatrixKind(str, Enum):
    ADJACENCY = "adjacency"
    DEGREE = "degree"
    LAPLACIAN = "laplacian"


def _coerce_kind(kind: Union[str, MatrixKind]) -> MatrixKind:
    try:
        return MatrixKind(kind)
    except ValueError:
        choices = ", ".join(k.value for k in MatrixKind)
        raise ValueError(f"unknown matrix kind {kind!r} (expected one of {choices})") from None


def build_matrix(
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    kind: Union[str, MatrixKind],
) -> np.ndarray:
    """Return the ``N x N`` matrix of ``kind`` indexed by vertex order.

    Parallel edges add up on the degree diagonal but leave a single 1 (or -1)
    in the off-diagonal entries.
    """

    kind = _coerce_kind(kind)
    n = len(vertices)
    matrix = np.zeros((n, n), dtype=int)

    for edge in edges:
        h = edge.head.index - 1
        t = edge.tail.index - 1
        if kind in (MatrixKind.DEGREE, MatrixKind.LAPLACIAN):
            matrix[h, h] += 1
            matrix[t, t] += 1
        if kind is MatrixKind.ADJACENCY:
            matrix[h, t] = 1
            matrix[t, h] = 1
        if kind is MatrixKind.LAPLACIAN:
            matrix[h, t] = -1
            matrix[t, h] = -1

    return matrix


def get_matrix(
    page: Page,
    kind: Union[str, MatrixKind],
    config: Optional[ExtractionConfig] = None,
) -> np.ndarray:
    """Get a graph matrix for the selection on ``page``."""

    vertices, edges = collect_graph(page, config)
    matrix = build_matrix(vertices, edges, kind)
    logger.debug("Built %s matrix of shape %s", _coerce_kind(kind).value, matrix.shape)
    return matrix


__all__ = ["MatrixKind", "build_matrix", "get_matrix"]
