from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from fim_prompt.errors import ConfigError


@dataclass(frozen=True)
class NotebookConfig:
    include_markup: bool = True
    include_cell_outputs: bool = False
    cell_output_limit: int = 256  # characters kept per output item


@dataclass(frozen=True)
class PromptConfig:
    prefix_max_lines: int = 64  # negative = unbounded
    suffix_max_lines: int = 16
    notebook: NotebookConfig = field(default_factory=NotebookConfig)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> PromptConfig:
        """Build a config from editor-style dotted setting keys.

        Recognized keys: ``prefixMaxLines``, ``suffixMaxLines``,
        ``notebook.includeMarkup``, ``notebook.includeCellOutputs`` and
        ``notebook.cellOutputLimit``. Missing keys keep their defaults.
        """
        defaults = cls()
        nb_defaults = defaults.notebook
        limit = _get_int(settings, "notebook.cellOutputLimit", nb_defaults.cell_output_limit)
        if limit <= 0:
            raise ConfigError(
                f"notebook.cellOutputLimit must be positive, got {limit}",
                key="notebook.cellOutputLimit",
            )
        notebook = NotebookConfig(
            include_markup=_get_bool(settings, "notebook.includeMarkup", nb_defaults.include_markup),
            include_cell_outputs=_get_bool(
                settings, "notebook.includeCellOutputs", nb_defaults.include_cell_outputs
            ),
            cell_output_limit=limit,
        )
        return cls(
            prefix_max_lines=_get_int(settings, "prefixMaxLines", defaults.prefix_max_lines),
            suffix_max_lines=_get_int(settings, "suffixMaxLines", defaults.suffix_max_lines),
            notebook=notebook,
        )


def load_settings(path: str | Path) -> PromptConfig:
    """Read a JSON settings file into a PromptConfig."""
    settings_path = Path(path)
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid settings file {settings_path}: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {settings_path} must contain a JSON object")
    return PromptConfig.from_settings(data)


def _get_bool(settings: Mapping[str, Any], key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be a boolean, got {value!r}", key=key)
    return value


def _get_int(settings: Mapping[str, Any], key: str, default: int) -> int:
    value = settings.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}", key=key)
    return value
