from __future__ import annotations

from typing import Optional


class KetabError(Exception):
    """Base user-facing error for ketab_books.

    Use this for predictable, actionable failures (unknown book, bad archive, etc.).
    CLI will catch this and print a concise message without a traceback.
    """


class FetchError(KetabError):
    """Network retrieval error for API calls or book archives."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NotFoundError(KetabError):
    """The API reported that the requested author/book/category does not exist."""


class ArchiveError(KetabError):
    """Downloaded book archive is unreadable or lacks the JSON payload."""
