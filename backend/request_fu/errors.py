"""Exception types raised by request_fu.

HTTP error statuses (4xx/5xx) are not exceptions: they come back as a
classified Response. Only a bad target or a failed transport raise.
"""

from typing import Any, Optional


class RequestFuError(Exception):
    """Base error for request_fu."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTarget(RequestFuError):
    """Target descriptor could not be turned into a URL."""

    def __init__(self, message: str, target: Any = None) -> None:
        super().__init__(message)
        self.target = target


class TransportError(RequestFuError):
    """The underlying HTTP client failed before a status came back."""

    def __init__(self, message: str, url: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause
