"""Exception types raised by the translation store."""
from __future__ import annotations

from typing import Optional


class TranslationError(Exception):
    """Base class for translation store errors."""


class LoadError(TranslationError):
    """The translation source could not be opened or read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Failed to load translations from: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ValidationError(TranslationError, ValueError):
    """An argument was rejected before any state was changed."""
