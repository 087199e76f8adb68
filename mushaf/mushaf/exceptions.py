"""
Custom exceptions for Mushaf library.

All exceptions inherit from MushafError for easy catching of library-specific errors.
"""

from pathlib import Path
from typing import Any


class MushafError(Exception):
    """Base exception for all Mushaf errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class CorpusLoadError(MushafError):
    """Raised when the corpus document cannot be read, parsed or validated."""

    def __init__(
        self,
        message: str = "Failed to load corpus data.",
        path: str | Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if path is not None:
            ctx["path"] = str(path)
        super().__init__(message, ctx)
        self.path = path


class CorpusStructureError(CorpusLoadError):
    """Raised when a loaded corpus violates a structural invariant."""

    def __init__(
        self,
        message: str,
        invariant: str,
        path: str | Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        ctx["invariant"] = invariant
        super().__init__(message, path=path, context=ctx)
        self.invariant = invariant


class InvalidArgumentError(MushafError, ValueError):
    """Raised when a query argument is outside its valid range."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if parameter:
            ctx["parameter"] = parameter
        super().__init__(message, ctx)
        self.parameter = parameter
        self.value = value


class NotFoundError(MushafError, LookupError):
    """Raised when a validated surah or ayah is missing from the loaded corpus."""

    def __init__(
        self,
        message: str,
        chapter_id: int | None = None,
        verse_id: int | None = None,
    ) -> None:
        ctx: dict[str, Any] = {}
        if chapter_id is not None:
            ctx["chapter_id"] = chapter_id
        if verse_id is not None:
            ctx["verse_id"] = verse_id
        super().__init__(message, ctx)
        self.chapter_id = chapter_id
        self.verse_id = verse_id


class CorpusBuildError(MushafError):
    """Raised when the source text for the corpus document is malformed or incomplete."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line_number: int | None = None,
    ) -> None:
        ctx: dict[str, Any] = {}
        if path is not None:
            ctx["path"] = str(path)
        if line_number is not None:
            ctx["line"] = line_number
        super().__init__(message, ctx)
        self.path = path
        self.line_number = line_number
