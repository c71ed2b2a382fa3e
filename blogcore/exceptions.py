"""
Exception hierarchy raised by the blog repositories.
"""

from __future__ import annotations

from typing import Any


class BlogError(Exception):
    """Base exception for blog repository errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class InputError(BlogError):
    """Raised when a required argument is empty or malformed."""


class NotFoundError(BlogError):
    """Raised when a referenced id does not resolve to a row."""


__all__ = ["BlogError", "InputError", "NotFoundError"]
