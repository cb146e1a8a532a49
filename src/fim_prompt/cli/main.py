"""fim-prompt CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from fim_prompt import __version__
from fim_prompt.builder import PromptBuilder
from fim_prompt.config import PromptConfig, load_settings
from fim_prompt.document import DocumentUri, Position, TextDocument
from fim_prompt.errors import FimPromptError
from fim_prompt.ipynb import load_notebook
from fim_prompt.languages import LANGUAGES
from fim_prompt.workspace import Workspace

CURSOR_MARKER = "<|cursor|>"


@click.group()
@click.version_option(version=__version__, prog_name="fim-prompt")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """fim-prompt - build fill-in-the-middle prompts for files and notebook cells."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--line", type=int, default=None, help="Zero-based cursor line.")
@click.option("--character", type=int, default=0, show_default=True, help="Zero-based cursor column.")
@click.option("--offset", type=int, default=None, help="Cursor offset; overrides --line.")
@click.option("--cell", "cell_index", type=int, default=None, help="Notebook cell index (for .ipynb files).")
@click.option("--prefix-lines", type=int, default=None, help="Max prefix lines (negative = unbounded).")
@click.option("--suffix-lines", type=int, default=None, help="Max suffix lines (negative = unbounded).")
@click.option("--settings", "settings_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="JSON settings file.")
@click.option("--language", "language_id", default=None, help="Declared language id.")
@click.option("--json/--text", "as_json", default=True, help="Output format.")
def render(
    path: str,
    line: int | None,
    character: int,
    offset: int | None,
    cell_index: int | None,
    prefix_lines: int | None,
    suffix_lines: int | None,
    settings_file: str | None,
    language_id: str | None,
    as_json: bool,
) -> None:
    """Build the prompt for a cursor position in PATH.

    Without --line or --offset the cursor sits at the end of the document.
    For notebooks, --cell picks the cell holding the cursor; the other
    cells are folded into the prompt.
    """
    file_path = Path(path)
    try:
        config = load_settings(settings_file) if settings_file else PromptConfig()
        workspace = Workspace()

        if cell_index is not None or file_path.suffix.lower() == ".ipynb":
            notebook = load_notebook(file_path, language_id)
            index = 0 if cell_index is None else cell_index
            if not 0 <= index < len(notebook.cells):
                click.echo(
                    f"Error: cell {index} out of range ({len(notebook.cells)} cells)", err=True
                )
                sys.exit(1)
            workspace.open_notebook(notebook)
            document = notebook.cells[index].document
        else:
            document = TextDocument(
                uri=DocumentUri(path=str(file_path)),
                text=_read_exact(file_path),
                language_id=language_id,
            )
    except (FimPromptError, OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if offset is not None:
        cursor = document.position_at(offset)
    elif line is not None:
        cursor = Position(line=line, character=character)
    else:
        cursor = document.position_at(len(document.get_text()))

    builder = PromptBuilder(config=config, notebooks=workspace)
    prompt = builder.build_prompt(document, cursor, prefix_lines, suffix_lines)

    if as_json:
        click.echo(json.dumps({"prefix": prompt.prefix, "suffix": prompt.suffix}, indent=2))
    else:
        click.echo(prompt.prefix + CURSOR_MARKER + prompt.suffix)


@cli.command()
def languages() -> None:
    """List the built-in language table."""
    for key, descriptor in LANGUAGES.items():
        comment = descriptor.comment
        if comment is None:
            syntax = "-"
        elif comment.end:
            syntax = f"{comment.start} ... {comment.end}"
        else:
            syntax = comment.start
        extensions = " ".join(descriptor.extensions + descriptor.filenames)
        click.echo(f"{key:<16} {descriptor.name:<16} {syntax:<12} {extensions}")


def _read_exact(path: Path) -> str:
    # newline="" keeps \r\n and \r so offsets match the file on disk
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()

