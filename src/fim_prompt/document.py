"""Text document snapshot and cursor positions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

# One line including its break; a trailing unterminated line matches alone.
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


@dataclass(frozen=True)
class DocumentUri:
    """Document identity: a filesystem path plus an optional fragment.

    Notebook cells share the notebook's path and are told apart by fragment.
    """

    path: str
    fragment: str = ""

    def __str__(self) -> str:
        return f"{self.path}#{self.fragment}" if self.fragment else self.path


@dataclass(frozen=True)
class Position:
    """Zero-based line and character of a cursor."""

    line: int
    character: int


class Document(Protocol):
    """What the prompt builder needs from an editor document."""

    @property
    def uri(self) -> DocumentUri: ...
    @property
    def language_id(self) -> str | None: ...

    def get_text(self) -> str: ...
    def offset_at(self, position: Position) -> int: ...


@dataclass(frozen=True)
class TextDocument:
    """Immutable in-memory document."""

    uri: DocumentUri
    text: str = ""
    language_id: str | None = None

    def get_text(self) -> str:
        return self.text

    def offset_at(self, position: Position) -> int:
        """Convert a line/character position to an offset into the text.

        Lines past the end clamp to the end of the text; characters past
        the end of a line clamp to the end of that line (before its line
        break).
        """
        if position.line < 0:
            return 0
        offset = 0
        lines = _LINE_RE.findall(self.text)
        if position.line >= len(lines):
            return len(self.text)
        for line in lines[: position.line]:
            offset += len(line)
        current = lines[position.line]
        content_length = len(current.rstrip("\r\n"))
        return offset + max(0, min(position.character, content_length))

    def position_at(self, offset: int) -> Position:
        """Inverse of :meth:`offset_at`; *offset* is clamped to the text."""
        offset = max(0, min(offset, len(self.text)))
        lines = _LINE_RE.findall(self.text)
        line_start = 0
        for index, line in enumerate(lines):
            content_end = line_start + len(line.rstrip("\r\n"))
            if offset <= content_end:
                return Position(index, offset - line_start)
            line_start += len(line)
            if offset < line_start:
                # inside a \r\n pair
                return Position(index, len(line.rstrip("\r\n")))
        return Position(len(lines), 0)
