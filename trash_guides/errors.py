"""Exceptions raised by the TRaSH Guides client."""

from typing import Optional


class TrashError(Exception):
    """Base class for all trash_guides errors."""


class NetworkError(TrashError):
    """
    A remote document could not be fetched or decoded.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status of the response, or None when no
            usable response was received (transport error, timeout)
    """

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"{status_code} {reason}".strip() if status_code is not None else reason
        super().__init__(f"Failed to fetch {url}: {detail}" if detail else f"Failed to fetch {url}")
