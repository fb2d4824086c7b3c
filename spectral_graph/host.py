"""Editor session glue: user interface protocol, undo stack and console UI."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from .document import Document, Page
from .printer import MatrixView, format_matrix_grid

logger = logging.getLogger(__name__)

CoordinateFields = Tuple[List[str], List[str]]


class UserInterface(Protocol):
    def warning(self, message: str) -> None:
        ...

    def show_matrix(self, view: MatrixView) -> None:
        ...

    def ask_coordinates(self, title: str, count: int) -> Optional[CoordinateFields]:
        """Return the raw ``x`` and ``y`` field texts, or ``None`` on cancel."""
        ...


class Transaction(Protocol):
    label: str

    def redo(self, document: Document) -> None:
        ...

    def undo(self, document: Document) -> None:
        ...


class UndoStack:
    """Linear undo history of registered transactions."""

    def __init__(self) -> None:
        self._done: List[Transaction] = []
        self._undone: List[Transaction] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def register(self, transaction: Transaction, document: Document) -> None:
        transaction.redo(document)
        self._done.append(transaction)
        self._undone.clear()

    def undo(self, document: Document) -> Optional[Transaction]:
        if not self._done:
            logger.info("Nothing to undo")
            return None
        transaction = self._done.pop()
        transaction.undo(document)
        self._undone.append(transaction)
        return transaction

    def redo(self, document: Document) -> Optional[Transaction]:
        if not self._undone:
            logger.info("Nothing to redo")
            return None
        transaction = self._undone.pop()
        transaction.redo(document)
        self._done.append(transaction)
        return transaction


class Editor:
    """The document being edited, the current page and the UI around it."""

    def __init__(
        self,
        document: Document,
        ui: UserInterface,
        pno: int = 0,
        undo_stack: Optional[UndoStack] = None,
    ) -> None:
        if not 0 <= pno < len(document):
            raise ValueError(f"page {pno} out of range (document has {len(document)} page(s))")
        self.document = document
        self.ui = ui
        self.pno = pno
        self.undo_stack = undo_stack or UndoStack()

    def page(self) -> Page:
        return self.document[self.pno]

    def register(self, transaction: Transaction) -> None:
        self.undo_stack.register(transaction, self.document)

    def undo(self) -> Optional[Transaction]:
        return self.undo_stack.undo(self.document)

    def redo(self) -> Optional[Transaction]:
        return self.undo_stack.redo(self.document)


class ConsoleUI:
    """Terminal stand-in for the editor's dialogs."""

    def __init__(
        self,
        x_values: Optional[Sequence[str]] = None,
        y_values: Optional[Sequence[str]] = None,
        prompt: Optional[Callable[[str], str]] = input,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.x_values = list(x_values) if x_values is not None else None
        self.y_values = list(y_values) if y_values is not None else None
        self.prompt = prompt
        self.echo = echo

    def warning(self, message: str) -> None:
        logger.warning(message)
        self.echo(f"Warning: {message}")

    def show_matrix(self, view: MatrixView) -> None:
        self.echo(format_matrix_grid(view))

    def ask_coordinates(self, title: str, count: int) -> Optional[CoordinateFields]:
        if self.x_values is not None and self.y_values is not None:
            return list(self.x_values), list(self.y_values)
        if self.prompt is None:
            return None
        self.echo(title)
        xs: List[str] = []
        ys: List[str] = []
        try:
            for i in range(1, count + 1):
                xs.append(self.prompt(f"x{i}: "))
                ys.append(self.prompt(f"y{i}: "))
        except EOFError:
            logger.info("Coordinate input cancelled")
            return None
        return xs, ys


__all__ = [
    "CoordinateFields",
    "UserInterface",
    "Transaction",
    "UndoStack",
    "Editor",
    "ConsoleUI",
]
