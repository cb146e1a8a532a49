"""Language table and detection.

The table maps a canonical language key to its descriptor. Only the
comment syntax matters to prompt building: it is how non-code text
(file headers, markdown cells, cell outputs) is embedded safely.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from typing import Mapping, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageComment:
    start: str
    end: str | None = None


@dataclass(frozen=True)
class LanguageDescriptor:
    name: str
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    comment: LanguageComment | None = None

    @property
    def comment_start(self) -> str | None:
        return self.comment.start if self.comment else None


class LanguageTable(Protocol):
    """Lookup from canonical language key to descriptor."""

    def get(self, key: str) -> LanguageDescriptor | None: ...


class LanguageDetector(Protocol):
    """Resolves a path and declared language id to a canonical key."""

    def __call__(self, path: str, language_id: str | None = None) -> str | None: ...


_HASH = LanguageComment("#")
_SLASHES = LanguageComment("//")
_DASHES = LanguageComment("--")

LANGUAGES: dict[str, LanguageDescriptor] = {
    "python": LanguageDescriptor("Python", (".py", ".pyi"), comment=_HASH),
    "javascript": LanguageDescriptor("Javascript", (".js", ".mjs", ".cjs"), comment=_SLASHES),
    "javascriptreact": LanguageDescriptor("Javascript JSX", (".jsx",), comment=_SLASHES),
    "typescript": LanguageDescriptor("Typescript", (".ts", ".mts", ".cts"), comment=_SLASHES),
    "typescriptreact": LanguageDescriptor("Typescript JSX", (".tsx",), comment=_SLASHES),
    "c": LanguageDescriptor("C", (".c", ".h"), comment=_SLASHES),
    "cpp": LanguageDescriptor("C++", (".cpp", ".cc", ".cxx", ".hpp", ".hh"), comment=_SLASHES),
    "csharp": LanguageDescriptor("C#", (".cs",), comment=_SLASHES),
    "java": LanguageDescriptor("Java", (".java",), comment=_SLASHES),
    "kotlin": LanguageDescriptor("Kotlin", (".kt", ".kts"), comment=_SLASHES),
    "scala": LanguageDescriptor("Scala", (".scala", ".sc"), comment=_SLASHES),
    "go": LanguageDescriptor("Go", (".go",), comment=_SLASHES),
    "rust": LanguageDescriptor("Rust", (".rs",), comment=_SLASHES),
    "swift": LanguageDescriptor("Swift", (".swift",), comment=_SLASHES),
    "dart": LanguageDescriptor("Dart", (".dart",), comment=_SLASHES),
    "php": LanguageDescriptor("PHP", (".php",), comment=_SLASHES),
    "ruby": LanguageDescriptor("Ruby", (".rb",), ("Gemfile", "Rakefile"), comment=_HASH),
    "shellscript": LanguageDescriptor("Shell", (".sh", ".bash", ".zsh"), comment=_HASH),
    "r": LanguageDescriptor("R", (".r",), comment=_HASH),
    "julia": LanguageDescriptor("Julia", (".jl",), comment=_HASH),
    "perl": LanguageDescriptor("Perl", (".pl", ".pm"), comment=_HASH),
    "yaml": LanguageDescriptor("YAML", (".yml", ".yaml"), comment=_HASH),
    "toml": LanguageDescriptor("TOML", (".toml",), comment=_HASH),
    "dockerfile": LanguageDescriptor("Dockerfile", (), ("Dockerfile",), comment=_HASH),
    "makefile": LanguageDescriptor("Makefile", (".mk",), ("Makefile", "GNUmakefile"), comment=_HASH),
    "sql": LanguageDescriptor("SQL", (".sql",), comment=_DASHES),
    "lua": LanguageDescriptor("Lua", (".lua",), comment=_DASHES),
    "haskell": LanguageDescriptor("Haskell", (".hs",), comment=_DASHES),
    "html": LanguageDescriptor("HTML", (".html", ".htm"), comment=LanguageComment("<!--", "-->")),
    "xml": LanguageDescriptor("XML", (".xml",), comment=LanguageComment("<!--", "-->")),
    "css": LanguageDescriptor("CSS", (".css",), comment=LanguageComment("/*", "*/")),
    "markdown": LanguageDescriptor("Markdown", (".md", ".markdown")),
    "json": LanguageDescriptor("JSON", (".json",)),
}


def detect_language(
    path: str,
    language_id: str | None = None,
    table: Mapping[str, LanguageDescriptor] | None = None,
) -> str | None:
    """Resolve a canonical language key for *path*.

    The declared *language_id* wins when the table knows it (compared
    lowercased, so notebook metadata like "R" resolves); otherwise the exact
    file name is matched, then the lowercased extension.
    Returns None when nothing matches.
    """
    languages = LANGUAGES if table is None else table

    if language_id:
        declared = language_id.lower()
        if declared in languages:
            return declared

    basename = posixpath.basename(path.replace("\\", "/"))
    extension = posixpath.splitext(basename)[1].lower()
    for key, descriptor in languages.items():
        if basename in descriptor.filenames:
            return key
    if extension:
        for key, descriptor in languages.items():
            if extension in descriptor.extensions:
                return key

    logger.debug("No language detected for path=%s language_id=%s", path, language_id)
    return None
