"""Reading Jupyter notebook files into NotebookDocument."""
from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path
from typing import Any

from fim_prompt.document import DocumentUri, TextDocument
from fim_prompt.errors import NotebookFormatError
from fim_prompt.notebook import CellKind, CellOutput, NotebookCell, NotebookDocument, OutputItem, TEXT_MIME

# Mime types nbformat stores base64-encoded rather than as text.
_BINARY_PREFIXES = ("image/png", "image/jpeg", "image/gif", "image/webp", "application/pdf")


def _join_source(value: Any) -> str:
    if isinstance(value, list):
        return "".join(str(part) for part in value)
    if value is None:
        return ""
    return str(value)


def _output_item(mime: str, value: Any) -> OutputItem:
    if mime.startswith(_BINARY_PREFIXES):
        try:
            return OutputItem(mime=mime, data=base64.b64decode(_join_source(value)))
        except (binascii.Error, ValueError):
            return OutputItem(mime=mime, data=b"")
    if not isinstance(value, (str, list)):
        # JSON mime bundles arrive as parsed objects
        value = json.dumps(value)
    return OutputItem(mime=mime, data=_join_source(value).encode("utf-8"))


def _parse_output(raw: dict[str, Any]) -> CellOutput:
    output_type = raw.get("output_type", "")
    if output_type == "stream":
        return CellOutput(items=(_output_item(TEXT_MIME, raw.get("text", "")),))
    if output_type in ("execute_result", "display_data"):
        data = raw.get("data") or {}
        return CellOutput(items=tuple(_output_item(mime, value) for mime, value in data.items()))
    if output_type == "error":
        text = f"{raw.get('ename', 'Error')}: {raw.get('evalue', '')}"
        return CellOutput(items=(_output_item(TEXT_MIME, text),))
    return CellOutput()


def parse_notebook(source: str, path: str, language_id: str | None = None) -> NotebookDocument:
    """Parse nbformat JSON text into a NotebookDocument.

    Cell identity is the cell ``id`` when present, otherwise ``cell-<index>``.
    Raises NotebookFormatError for invalid JSON or a missing cell list.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise NotebookFormatError(f"Invalid notebook JSON in {path}: {exc}", path=path, cause=exc) from exc

    if not isinstance(data, dict) or not isinstance(data.get("cells"), list):
        raise NotebookFormatError(f"Notebook {path} has no 'cells' list", path=path)

    if language_id is None:
        language_info = (data.get("metadata") or {}).get("language_info") or {}
        language_id = language_info.get("name")

    cells: list[NotebookCell] = []
    for index, raw in enumerate(data["cells"]):
        if not isinstance(raw, dict):
            raise NotebookFormatError(f"Cell {index} of {path} is not an object", path=path)
        kind = CellKind.MARKUP if raw.get("cell_type") == "markdown" else CellKind.CODE
        fragment = str(raw.get("id") or f"cell-{index}")
        document = TextDocument(
            uri=DocumentUri(path=path, fragment=fragment),
            text=_join_source(raw.get("source")),
            language_id="markdown" if kind == CellKind.MARKUP else language_id,
        )
        outputs = tuple(
            _parse_output(out) for out in raw.get("outputs", []) if isinstance(out, dict)
        )
        cells.append(NotebookCell(document=document, kind=kind, outputs=outputs))

    return NotebookDocument(uri=DocumentUri(path=path), cells=tuple(cells))


def load_notebook(path: str | Path, language_id: str | None = None) -> NotebookDocument:
    """Read a ``.ipynb`` file from disk."""
    notebook_path = Path(path)
    return parse_notebook(notebook_path.read_text(encoding="utf-8"), str(notebook_path), language_id)
