"""File header injection."""
from __future__ import annotations

from fim_prompt.languages import LanguageComment, LanguageDescriptor


def _comment_line(comment: LanguageComment, text: str) -> str:
    if comment.end:
        return f"{comment.start} {text} {comment.end}\n"
    return f"{comment.start} {text}\n"


def file_header(prefix: str, path: str, language: LanguageDescriptor | None) -> str:
    """Prepend comment lines naming the file path and language to *prefix*.

    Most models have no notion of file names, but training data often
    carries them in a leading comment. Without a known comment syntax the
    prefix is returned unchanged.
    """
    if language is None or language.comment is None:
        return prefix
    header = _comment_line(language.comment, f"Path: {path}")
    header += _comment_line(language.comment, f"Language: {language.name}")
    return header + prefix
