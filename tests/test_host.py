import pytest

from spectral_graph.document import Document, Page
from spectral_graph.host import ConsoleUI, Editor, UndoStack
from spectral_graph.printer import matrix_view


class CountingTransaction:
    label = "count"

    def redo(self, document):
        document.pages.append(Page())

    def undo(self, document):
        document.pages.pop()


def test_undo_stack_register_undo_redo():
    document = Document([Page()])
    stack = UndoStack()

    stack.register(CountingTransaction(), document)
    assert len(document) == 2
    assert stack.can_undo and not stack.can_redo

    stack.undo(document)
    assert len(document) == 1
    assert stack.can_redo

    stack.redo(document)
    assert len(document) == 2


def test_register_clears_redo_branch():
    document = Document([Page()])
    stack = UndoStack()
    stack.register(CountingTransaction(), document)
    stack.undo(document)

    stack.register(CountingTransaction(), document)

    assert not stack.can_redo
    assert stack.redo(document) is None


def test_editor_rejects_unknown_page():
    with pytest.raises(ValueError):
        Editor(Document([Page()]), ConsoleUI(prompt=None), pno=3)


def test_console_ui_prompts_for_each_vertex():
    answers = iter(["0", "1", "2", "3"])
    echoed = []
    ui = ConsoleUI(prompt=lambda text: next(answers), echo=echoed.append)

    assert ui.ask_coordinates("Enter Eigenvectors", 2) == (["0", "2"], ["1", "3"])
    assert echoed == ["Enter Eigenvectors"]


def test_console_ui_end_of_input_cancels():
    def _eof(text):
        raise EOFError

    ui = ConsoleUI(prompt=_eof, echo=lambda text: None)

    assert ui.ask_coordinates("Enter Eigenvectors", 2) is None


def test_console_ui_prefilled_values_and_output():
    echoed = []
    ui = ConsoleUI(x_values=["1"], y_values=["2"], echo=echoed.append)

    assert ui.ask_coordinates("Enter Eigenvectors", 1) == (["1"], ["2"])

    ui.show_matrix(matrix_view([[0]], "Degree Matrix"))
    ui.warning("Missing Selection")
    assert echoed[0].startswith("Degree Matrix")
    assert echoed[1] == "Warning: Missing Selection"
