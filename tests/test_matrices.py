import numpy as np
import pytest

from spectral_graph.document import Page, Rect, Vector
from spectral_graph.graph import Edge, Vertex
from spectral_graph.matrices import MatrixKind, build_matrix, get_matrix


def make_vertices(n):
    return [
        Vertex(name=f"v{i}", obj=i, bbox=Rect(Vector(i, 0), Vector(i + 1, 1)), pos=Vector(i, 0), index=i + 1)
        for i in range(n)
    ]


def make_edges(vertices, pairs):
    return [Edge(head=vertices[h - 1], tail=vertices[t - 1], obj=100 + k) for k, (h, t) in enumerate(pairs)]


def test_path_graph_matrices():
    vertices = make_vertices(3)
    edges = make_edges(vertices, [(1, 2), (2, 3)])

    np.testing.assert_array_equal(
        build_matrix(vertices, edges, "adjacency"), [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    )
    np.testing.assert_array_equal(
        build_matrix(vertices, edges, "degree"), [[1, 0, 0], [0, 2, 0], [0, 0, 1]]
    )
    np.testing.assert_array_equal(
        build_matrix(vertices, edges, MatrixKind.LAPLACIAN), [[1, -1, 0], [-1, 2, -1], [0, -1, 1]]
    )


def test_triangle_laplacian():
    vertices = make_vertices(3)
    edges = make_edges(vertices, [(1, 2), (2, 3), (3, 1)])

    laplacian = build_matrix(vertices, edges, "laplacian")

    np.testing.assert_array_equal(np.diag(laplacian), [2, 2, 2])
    np.testing.assert_array_equal(laplacian, 3 * np.eye(3, dtype=int) - np.ones((3, 3), dtype=int))


def test_parallel_edges_count_only_in_degree():
    vertices = make_vertices(2)
    edges = make_edges(vertices, [(1, 2), (2, 1), (1, 2)])

    np.testing.assert_array_equal(build_matrix(vertices, edges, "degree"), [[3, 0], [0, 3]])
    np.testing.assert_array_equal(build_matrix(vertices, edges, "adjacency"), [[0, 1], [1, 0]])
    np.testing.assert_array_equal(build_matrix(vertices, edges, "laplacian"), [[3, -1], [-1, 3]])


@pytest.mark.parametrize("kind", ["adjacency", "laplacian"])
def test_matrices_are_symmetric(kind):
    vertices = make_vertices(6)
    edges = make_edges(vertices, [(1, 2), (2, 3), (3, 4), (4, 1), (5, 2), (6, 5), (1, 3)])

    matrix = build_matrix(vertices, edges, kind)

    np.testing.assert_array_equal(matrix, matrix.T)


def test_laplacian_rows_sum_to_zero():
    vertices = make_vertices(6)
    edges = make_edges(vertices, [(1, 2), (2, 3), (3, 4), (4, 1), (5, 2), (6, 5), (1, 3)])

    laplacian = build_matrix(vertices, edges, "laplacian")

    np.testing.assert_array_equal(laplacian.sum(axis=1), np.zeros(6, dtype=int))


def test_empty_graph_gives_empty_matrix():
    assert build_matrix([], [], "degree").shape == (0, 0)
    assert get_matrix(Page(), "laplacian").shape == (0, 0)


def test_unknown_kind_raises_value_error():
    with pytest.raises(ValueError) as exc:
        build_matrix([], [], "incidence")

    assert "unknown matrix kind" in str(exc.value)
