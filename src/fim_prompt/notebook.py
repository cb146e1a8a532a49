"""Notebook model and aggregation of sibling cells into the prompt."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Sequence

from fim_prompt.config import NotebookConfig
from fim_prompt.document import DocumentUri, TextDocument

logger = logging.getLogger(__name__)

TEXT_MIME = "text/plain"


class CellKind(StrEnum):
    MARKUP = "markup"
    CODE = "code"


@dataclass(frozen=True)
class OutputItem:
    mime: str
    data: bytes


@dataclass(frozen=True)
class CellOutput:
    items: tuple[OutputItem, ...] = ()


@dataclass(frozen=True)
class NotebookCell:
    document: TextDocument
    kind: CellKind = CellKind.CODE
    outputs: tuple[CellOutput, ...] = ()

    @property
    def text(self) -> str:
        return self.document.get_text()


@dataclass(frozen=True)
class NotebookDocument:
    uri: DocumentUri
    cells: tuple[NotebookCell, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CellContext:
    """Text contributed by the cells before and after the current one."""

    prefix: str = ""
    suffix: str = ""


def find_current_index(cells: Sequence[NotebookCell], current: DocumentUri) -> int | None:
    """Index of the cell whose identity (URI fragment) matches *current*."""
    for index, cell in enumerate(cells):
        if cell.document.uri.fragment == current.fragment:
            return index
    return None


def output_lines(cell: NotebookCell, limit: int) -> list[str]:
    """Plain-text output lines of *cell*, each item truncated to *limit* chars.

    Items with any other MIME type are skipped.
    """
    lines: list[str] = []
    for output in cell.outputs:
        for item in output.items:
            if item.mime != TEXT_MIME:
                continue
            text = item.data.decode("utf-8")
            lines.extend(text[:limit].split("\n"))
    return lines


def render_cell(
    cell: NotebookCell,
    comment_start: str | None,
    config: NotebookConfig,
    *,
    with_outputs: bool,
) -> str:
    """Render one sibling cell as prompt text.

    Markdown cells become line comments, or nothing when markup is
    excluded or the language has no comment syntax. Only code is verbatim.
    Outputs are appended as comments only when *with_outputs* is set.
    """
    out = ""
    if cell.kind == CellKind.MARKUP:
        if comment_start is not None and config.include_markup:
            for line in cell.text.split("\n"):
                out += f"\n{comment_start}{line}"
    else:
        out += cell.text

    if (
        with_outputs
        and config.include_cell_outputs
        and cell.kind == CellKind.CODE
        and comment_start is not None
    ):
        lines = output_lines(cell, config.cell_output_limit)
        if lines:
            out += f"\n{comment_start}Output:"
            for line in lines:
                out += f"\n{comment_start}{line}"
    return out


def aggregate_cells(
    cells: Sequence[NotebookCell],
    current: DocumentUri,
    comment_start: str | None,
    config: NotebookConfig,
) -> CellContext:
    """Fold the cells around *current* into prefix and suffix text.

    Cells before the current one go to the prefix (with their outputs, since
    only they have run from the cursor's point of view), cells after it to
    the suffix. The current cell contributes nothing here.

    When no cell matches *current*, every cell is treated as preceding it.
    """
    current_index = find_current_index(cells, current)
    if current_index is None:
        logger.debug(
            "Current cell %s not found among %d cells; treating all as preceding",
            current, len(cells),
        )
        current_index = len(cells)

    prefix_parts = [
        render_cell(cell, comment_start, config, with_outputs=True)
        for cell in cells[:current_index]
    ]
    suffix_parts = [
        render_cell(cell, comment_start, config, with_outputs=False)
        for cell in cells[current_index + 1:]
    ]
    return CellContext(prefix="".join(prefix_parts), suffix="".join(suffix_parts))
