"""The four user-facing operations and their menu registry."""

from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional

import numpy as np

from .graph import collect_graph
from .host import Editor
from .layout import LayoutOptions, LayoutTransaction, build_layout_transaction
from .matrices import MatrixKind, get_matrix
from .printer import matrix_view
from .validate import ValidationError, parse_coordinates

logger = logging.getLogger(__name__)

MISSING_SELECTION = "Missing Selection"

MATRIX_TITLES = {
    MatrixKind.LAPLACIAN: "Laplacian Matrix",
    MatrixKind.DEGREE: "Degree Matrix",
    MatrixKind.ADJACENCY: "Adjacency matrix",
}


def show_matrix(editor: Editor, matrix: np.ndarray, name: str) -> bool:
    """Show ``matrix`` read-only; warn instead when the selection is empty."""

    if matrix.shape[0] == 0:
        editor.ui.warning(MISSING_SELECTION)
        return False
    editor.ui.show_matrix(matrix_view(matrix, name))
    return True


def _show(editor: Editor, kind: MatrixKind) -> bool:
    matrix = get_matrix(editor.page(), kind)
    return show_matrix(editor, matrix, MATRIX_TITLES[kind])


def show_laplacian_matrix(editor: Editor) -> bool:
    return _show(editor, MatrixKind.LAPLACIAN)


def show_degree_matrix(editor: Editor) -> bool:
    return _show(editor, MatrixKind.DEGREE)


def show_adjacency_matrix(editor: Editor) -> bool:
    return _show(editor, MatrixKind.ADJACENCY)


def spectral_layout(
    editor: Editor, options: Optional[LayoutOptions] = None
) -> Optional[LayoutTransaction]:
    """Ask for eigenvector coordinates and lay out the selected graph.

    Returns the registered transaction, or ``None`` when the dialog was
    cancelled, nothing was selected or the input did not validate.  In every
    ``None`` case the document is left untouched.
    """

    page = editor.page()
    vertices, edges = collect_graph(page)
    if not vertices:
        editor.ui.warning(MISSING_SELECTION)
        return None

    fields = editor.ui.ask_coordinates("Enter Eigenvectors", len(vertices))
    if fields is None:
        logger.info("Spectral layout cancelled")
        return None

    try:
        ex, ey = parse_coordinates(fields[0], fields[1], len(vertices))
    except ValidationError as exc:
        editor.ui.warning(f"Invalid eigenvector input: {exc}")
        return None

    transaction = build_layout_transaction(
        page, editor.pno, vertices, edges, ex, ey, options=options
    )
    editor.register(transaction)
    return transaction


class Method(NamedTuple):
    label: str
    run: Callable[[Editor], object]


METHODS: List[Method] = [
    Method("Show Laplacian Matrix", show_laplacian_matrix),
    Method("Show Degree Matrix", show_degree_matrix),
    Method("Show Adjacency Matrix", show_adjacency_matrix),
    Method("Spectral Layout", spectral_layout),
]


__all__ = [
    "MISSING_SELECTION",
    "MATRIX_TITLES",
    "show_matrix",
    "show_laplacian_matrix",
    "show_degree_matrix",
    "show_adjacency_matrix",
    "spectral_layout",
    "Method",
    "METHODS",
]
