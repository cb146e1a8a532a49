"""Prompt construction for fill-in-the-middle completion."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fim_prompt.config import PromptConfig
from fim_prompt.document import Document, Position
from fim_prompt.headers import file_header
from fim_prompt.languages import LANGUAGES, LanguageDetector, LanguageTable, detect_language
from fim_prompt.notebook import aggregate_cells
from fim_prompt.windowing import window_prefix, window_suffix
from fim_prompt.workspace import NotebookAccessor, Workspace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prompt:
    prefix: str
    suffix: str


class PromptBuilder:
    """Builds the prefix/suffix pair sent to a completion model.

    Collaborators are injected so the builder runs without an editor:
    *notebooks* resolves the notebook owning a document, *detector* maps
    a path to a language key and *languages* maps that key to comment
    syntax.
    """

    def __init__(
        self,
        config: PromptConfig | None = None,
        notebooks: NotebookAccessor | None = None,
        detector: LanguageDetector | None = None,
        languages: LanguageTable | None = None,
    ) -> None:
        self._config = config or PromptConfig()
        self._notebooks = notebooks if notebooks is not None else Workspace()
        self._detector = detector or detect_language
        self._languages = languages if languages is not None else LANGUAGES

    @property
    def config(self) -> PromptConfig:
        return self._config

    async def prepare_prompt(
        self,
        document: Document,
        position: Position,
        prefix_max_lines: int | None = None,
        suffix_max_lines: int | None = None,
    ) -> Prompt:
        """Coroutine form of :meth:`build_prompt` for event-loop callers."""
        return self.build_prompt(document, position, prefix_max_lines, suffix_max_lines)

    def build_prompt(
        self,
        document: Document,
        position: Position,
        prefix_max_lines: int | None = None,
        suffix_max_lines: int | None = None,
    ) -> Prompt:
        """Snapshot *document* at *position* and assemble the prompt.

        Line limits default to the config; negative limits are unbounded.
        """
        if prefix_max_lines is None:
            prefix_max_lines = self._config.prefix_max_lines
        if suffix_max_lines is None:
            suffix_max_lines = self._config.suffix_max_lines

        text = document.get_text()
        offset = document.offset_at(position)

        prefix = window_prefix(text[:offset], prefix_max_lines)
        suffix = window_suffix(text[offset:], suffix_max_lines)

        path = document.uri.path
        language_key = self._detector(path, document.language_id)
        language = self._languages.get(language_key) if language_key is not None else None
        comment_start = language.comment_start if language is not None else None
        logger.debug("Prompt for %s: language=%s offset=%d", document.uri, language_key, offset)

        notebook = self._notebooks.find_notebook(document)
        if notebook is not None:
            cells = aggregate_cells(
                notebook.cells, document.uri, comment_start, self._config.notebook
            )
            logger.debug(
                "Notebook %s: %d cells, prefix +%d chars, suffix +%d chars",
                notebook.uri, len(notebook.cells), len(cells.prefix), len(cells.suffix),
            )
            prefix = cells.prefix + prefix
            suffix = suffix + cells.suffix

        if language is not None:
            prefix = file_header(prefix, path, language)

        return Prompt(prefix=prefix, suffix=suffix)
