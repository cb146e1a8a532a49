"""Error hierarchy for fim_prompt.

Prompt preparation itself never raises; these errors come from the
boundaries where settings and notebook files are read.
"""
from __future__ import annotations


class FimPromptError(Exception):
    """Base error for all fim_prompt errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(FimPromptError):
    """A settings value has the wrong type or is out of range."""

    def __init__(self, message: str, *, key: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.key = key


class NotebookFormatError(FimPromptError):
    """A notebook file could not be read as nbformat JSON."""

    def __init__(self, message: str, *, path: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path
