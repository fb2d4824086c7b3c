from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np
from scipy.io import savemat


@dataclass(frozen=True)
class MatrixView:
    """Read-only presentation of a matrix: a labelled grid plus copyable text."""

    title: str
    opening: str
    closing: str
    label_row: int
    cells: List[List[str]]
    text: str


def format_cell(value: object) -> str:
    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    number = float(value)  # type: ignore[arg-type]
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


def format_matrix_text(matrix: np.ndarray) -> str:
    """Return ``matrix`` as ``[ a b c; d e f;]`` for numeric tools."""

    parts = ["["]
    for row in np.asarray(matrix):
        for cell in row:
            parts.append(" " + format_cell(cell))
        parts.append(";")
    parts.append("]")
    return "".join(parts)


def matrix_view(matrix: np.ndarray, name: str) -> MatrixView:
    matrix = np.asarray(matrix)
    n = matrix.shape[0]
    cells = [[format_cell(cell) for cell in row] for row in matrix]
    return MatrixView(
        title=name,
        opening=f"{name[:1]} = (",
        closing=")",
        label_row=max(math.ceil(n / 2), 1),
        cells=cells,
        text=format_matrix_text(matrix),
    )


def format_matrix_grid(view: MatrixView) -> str:
    """Render ``view`` as aligned console text."""

    width = max((len(cell) for row in view.cells for cell in row), default=1)
    pad = " " * (len(view.opening) + 1)
    lines = [view.title]
    for row_no, row in enumerate(view.cells, start=1):
        body = " ".join(cell.rjust(width) for cell in row)
        if row_no == view.label_row:
            lines.append(f"{view.opening} {body} {view.closing}")
        else:
            lines.append(f"{pad}{body}")
    lines.append(view.text)
    return "\n".join(lines)


def save_matrix_mat(path: Union[str, Path], matrix: np.ndarray, name: str) -> None:
    """Write ``matrix`` to a MATLAB ``.mat`` file under variable ``name``."""

    savemat(str(path), {name: np.asarray(matrix, dtype=float)})


__all__ = [
    "MatrixView",
    "format_cell",
    "format_matrix_text",
    "matrix_view",
    "format_matrix_grid",
    "save_matrix_mat",
]
