"""Example pipeline: build a 4-cycle, print its Laplacian and lay it out."""

import numpy as np

from spectral_graph import (
    ConsoleUI,
    Curve,
    Document,
    Editor,
    Page,
    PageObject,
    Rect,
    Segment,
    Vector,
    format_matrix_text,
    get_matrix,
    spectral_layout,
)

CENTERS = [(0, 0), (60, 0), (60, 60), (0, 60)]


def build_page() -> Page:
    page = Page()
    for x, y in CENTERS:
        page.insert(PageObject("reference", extent=Rect(Vector(x - 2, y - 2), Vector(x + 2, y + 2))), True)
    for (ax, ay), (bx, by) in zip(CENTERS, CENTERS[1:] + CENTERS[:1]):
        segment = Segment("segment", [Vector(ax, ay), Vector(bx, by)])
        page.insert(PageObject("path", shape=[Curve([segment])]), True)
    return page


def main() -> None:
    page = build_page()
    laplacian = get_matrix(page, "laplacian")
    print("Laplacian:", format_matrix_text(laplacian))

    # the eigen-solve happens outside the package; numpy stands in for it here
    _, vectors = np.linalg.eigh(laplacian)
    ex = [f"{value:.6f}" for value in vectors[:, 1]]
    ey = [f"{value:.6f}" for value in vectors[:, 2]]

    editor = Editor(Document([page]), ConsoleUI(x_values=ex, y_values=ey))
    spectral_layout(editor)
    for i, obj, _ in editor.page().objects():
        print(f"object {i}: {obj.type} bbox={obj.bbox()}")


if __name__ == "__main__":
    main()
