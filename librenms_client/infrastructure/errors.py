"""Custom exceptions for the LibreNMS API client."""

from __future__ import annotations


class LibreNMSError(Exception):
    """Base exception for LibreNMS."""


class LibreNMSConfigError(LibreNMSError):
    """Raised when the client is constructed with an invalid configuration."""


class LibreNMSConnectionError(LibreNMSError):
    """Raised when the request cannot be delivered to the API."""


class LibreNMSTimeoutError(LibreNMSConnectionError):
    """Raised when the transport gives up waiting for the API."""


class LibreNMSValidationError(LibreNMSError):
    """Raised when a request fails local validation before being sent."""


class LibreNMSDecodeError(LibreNMSError, ValueError):
    """Raised when a response body or field cannot be decoded.

    Also a ValueError so the flexible codecs can raise it from inside
    pydantic validators.
    """

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message)
        self.url = url


class LibreNMSAPIError(LibreNMSError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code.
        reason: HTTP reason phrase.
        url: URL of the failed request.
        message: Message decoded from the error body, the raw body text when it
            is not an error envelope, or the status line when the body is empty.
        api_status: The "status" string of the error envelope, if any.
    """

    def __init__(
        self,
        *,
        status: int,
        reason: str,
        url: str,
        message: str = "",
        api_status: str = "",
    ):
        self.status = status
        self.reason = reason
        self.url = url
        self.api_status = api_status
        self.message = message or self.status_line

        text = f"{self.status_line} {url}"
        if message:
            text += f": {message}"
        super().__init__(text)

    @property
    def status_line(self) -> str:
        """Status code and reason phrase, e.g. '404 Not Found'."""
        return f"{self.status} {self.reason}".strip()
