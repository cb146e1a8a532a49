"""fim_prompt: prefix/suffix prompt assembly for code completion in files and notebooks."""

from fim_prompt.builder import Prompt, PromptBuilder
from fim_prompt.config import NotebookConfig, PromptConfig, load_settings
from fim_prompt.document import DocumentUri, Position, TextDocument
from fim_prompt.errors import ConfigError, FimPromptError, NotebookFormatError
from fim_prompt.headers import file_header
from fim_prompt.languages import LANGUAGES, LanguageComment, LanguageDescriptor, detect_language
from fim_prompt.notebook import (
    CellContext,
    CellKind,
    CellOutput,
    NotebookCell,
    NotebookDocument,
    OutputItem,
    aggregate_cells,
)
from fim_prompt.windowing import UNBOUNDED, window_prefix, window_suffix
from fim_prompt.workspace import NotebookAccessor, Workspace

__version__ = "0.1.0"

__all__ = [
    # Builder
    "Prompt",
    "PromptBuilder",
    # Config
    "NotebookConfig",
    "PromptConfig",
    "load_settings",
    # Documents
    "DocumentUri",
    "Position",
    "TextDocument",
    # Notebooks
    "CellContext",
    "CellKind",
    "CellOutput",
    "NotebookCell",
    "NotebookDocument",
    "OutputItem",
    "aggregate_cells",
    "NotebookAccessor",
    "Workspace",
    # Languages
    "LANGUAGES",
    "LanguageComment",
    "LanguageDescriptor",
    "detect_language",
    "file_header",
    # Windowing
    "UNBOUNDED",
    "window_prefix",
    "window_suffix",
    # Errors
    "FimPromptError",
    "ConfigError",
    "NotebookFormatError",
]
