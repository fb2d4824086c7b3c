import copy

from spectral_graph.commands import (
    METHODS,
    MISSING_SELECTION,
    show_adjacency_matrix,
    show_degree_matrix,
    show_laplacian_matrix,
    spectral_layout,
)
from spectral_graph.document import Curve, Document, Page, PageObject, Rect, Segment, Vector
from spectral_graph.host import Editor


class RecordingUI:
    def __init__(self, fields=None):
        self.fields = fields
        self.warnings = []
        self.views = []
        self.prompts = []

    def warning(self, message):
        self.warnings.append(message)

    def show_matrix(self, view):
        self.views.append(view)

    def ask_coordinates(self, title, count):
        self.prompts.append((title, count))
        return self.fields


def node(x, y):
    return PageObject("reference", extent=Rect(Vector(x - 2, y - 2), Vector(x + 2, y + 2)))


def stroke(a, b):
    return PageObject("path", shape=[Curve([Segment("segment", [Vector(*a), Vector(*b)])])])


def triangle_document():
    page = Page()
    page.insert(node(0, 0), True)
    page.insert(node(40, 0), True)
    page.insert(node(20, 30), True)
    page.insert(stroke((0, 0), (40, 0)), True)
    page.insert(stroke((40, 0), (20, 30)), True)
    page.insert(stroke((20, 30), (0, 0)), True)
    return Document([page])


def test_show_laplacian_matrix_opens_view():
    ui = RecordingUI()
    editor = Editor(triangle_document(), ui)

    assert show_laplacian_matrix(editor) is True

    (view,) = ui.views
    assert view.title == "Laplacian Matrix"
    assert view.text == "[ 2 -1 -1; -1 2 -1; -1 -1 2;]"
    assert ui.warnings == []


def test_show_degree_and_adjacency_titles():
    ui = RecordingUI()
    editor = Editor(triangle_document(), ui)

    show_degree_matrix(editor)
    show_adjacency_matrix(editor)

    assert [view.title for view in ui.views] == ["Degree Matrix", "Adjacency matrix"]
    assert ui.views[1].opening == "A = ("


def test_empty_selection_warns_and_shows_nothing():
    document = triangle_document()
    for i, _, _ in document[0].objects():
        document[0].set_selected(i, False)
    ui = RecordingUI()

    assert show_adjacency_matrix(Editor(document, ui)) is False
    assert spectral_layout(Editor(document, ui)) is None

    assert ui.views == []
    assert ui.warnings == [MISSING_SELECTION, MISSING_SELECTION]


def test_cancelled_layout_leaves_document_alone():
    document = triangle_document()
    before = copy.deepcopy(document[0])
    ui = RecordingUI(fields=None)
    editor = Editor(document, ui)

    assert spectral_layout(editor) is None

    assert ui.prompts == [("Enter Eigenvectors", 3)]
    assert document[0] == before
    assert not editor.undo_stack.can_undo


def test_invalid_input_is_reported_before_any_change():
    document = triangle_document()
    before = copy.deepcopy(document[0])
    ui = RecordingUI(fields=(["0", "1", "x"], ["0", "1", "2"]))
    editor = Editor(document, ui)

    assert spectral_layout(editor) is None

    assert len(ui.warnings) == 1
    assert "x3: expected a number" in ui.warnings[0]
    assert document[0] == before
    assert not editor.undo_stack.can_undo


def test_confirmed_layout_is_registered_and_undoable():
    document = triangle_document()
    before = copy.deepcopy(document[0])
    ui = RecordingUI(fields=(["0", "2", "1"], ["0", "0", "1"]))
    editor = Editor(document, ui)

    transaction = spectral_layout(editor)

    assert transaction is not None
    assert transaction.label == "Spectral Layout"
    assert editor.undo_stack.can_undo
    assert document[0] != before

    editor.undo()
    assert document[0] == before


def test_menu_labels():
    assert [method.label for method in METHODS] == [
        "Show Laplacian Matrix",
        "Show Degree Matrix",
        "Show Adjacency Matrix",
        "Spectral Layout",
    ]
    assert METHODS[3].run is spectral_layout
