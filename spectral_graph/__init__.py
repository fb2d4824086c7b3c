from .document import Vector, Rect, Matrix, Segment, Curve, Ellipse, PageObject, Page, Document, straight_segment
from .config import ExtractionConfig, get_extraction_config, set_extraction_config
from .graph import Vertex, Edge, collect_graph, find_vertex
from .matrices import MatrixKind, build_matrix, get_matrix
from .printer import MatrixView, format_matrix_text, format_matrix_grid, matrix_view, save_matrix_mat
from .validate import ValidationError, parse_coordinates
from .layout import (
    AxisFit,
    LayoutOptions,
    LayoutTransaction,
    apply_layout,
    build_layout_transaction,
    fit_axis,
    mapped_positions,
    selection_bbox,
)
from .host import ConsoleUI, Editor, UndoStack, UserInterface
from .commands import (
    METHODS,
    MATRIX_TITLES,
    MISSING_SELECTION,
    show_adjacency_matrix,
    show_degree_matrix,
    show_laplacian_matrix,
    show_matrix,
    spectral_layout,
)
from .io import load_document, dump_document, document_from_dict, document_to_dict

__all__ = [
    'Vector',
    'Rect',
    'Matrix',
    'Segment',
    'Curve',
    'Ellipse',
    'PageObject',
    'Page',
    'Document',
    'straight_segment',
    'ExtractionConfig',
    'get_extraction_config',
    'set_extraction_config',
    'Vertex',
    'Edge',
    'collect_graph',
    'find_vertex',
    'MatrixKind',
    'build_matrix',
    'get_matrix',
    'MatrixView',
    'format_matrix_text',
    'format_matrix_grid',
    'matrix_view',
    'save_matrix_mat',
    'ValidationError',
    'parse_coordinates',
    'AxisFit',
    'LayoutOptions',
    'LayoutTransaction',
    'apply_layout',
    'build_layout_transaction',
    'fit_axis',
    'mapped_positions',
    'selection_bbox',
    'ConsoleUI',
    'Editor',
    'UndoStack',
    'UserInterface',
    'METHODS',
    'MATRIX_TITLES',
    'MISSING_SELECTION',
    'show_adjacency_matrix',
    'show_degree_matrix',
    'show_laplacian_matrix',
    'show_matrix',
    'spectral_layout',
    'load_document',
    'dump_document',
    'document_from_dict',
    'document_to_dict',
]
