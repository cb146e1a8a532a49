"""Notebook lookup for open documents."""

from __future__ import annotations

from typing import Iterable, Protocol

from fim_prompt.document import Document
from fim_prompt.notebook import NotebookDocument


class NotebookAccessor(Protocol):
    """Finds the notebook a document belongs to, if any."""

    def find_notebook(self, document: Document) -> NotebookDocument | None: ...


class Workspace:
    """In-memory set of open notebooks.

    A document belongs to a notebook when its URI path equals the
    notebook's path; cells differ only by fragment.
    """

    def __init__(self, notebooks: Iterable[NotebookDocument] | None = None) -> None:
        self._notebooks: list[NotebookDocument] = list(notebooks) if notebooks else []

    def open_notebook(self, notebook: NotebookDocument) -> None:
        self._notebooks = [nb for nb in self._notebooks if nb.uri.path != notebook.uri.path]
        self._notebooks.append(notebook)

    def close_notebook(self, path: str) -> None:
        self._notebooks = [nb for nb in self._notebooks if nb.uri.path != path]

    @property
    def notebooks(self) -> list[NotebookDocument]:
        return list(self._notebooks)

    def find_notebook(self, document: Document) -> NotebookDocument | None:
        for notebook in self._notebooks:
            if notebook.uri.path == document.uri.path:
                return notebook
        return None
