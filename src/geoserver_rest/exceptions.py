"""
Exceptions raised by the GeoServer REST client.

Every HTTP-level failure carries the status code and the raw response body so
callers can log what GeoServer actually answered.
"""

from __future__ import annotations

from typing import Optional


class GeoServerError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class TransportError(GeoServerError):
    """The HTTP round-trip itself failed (connection refused, timeout, ...)."""


class XMLDecodeError(GeoServerError):
    """A response body could not be mapped onto the expected model."""


class UnauthorizedError(GeoServerError):
    def __init__(self, message: str = "unauthorized", **kwargs) -> None:
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class NotFoundError(GeoServerError):
    def __init__(self, message: str = "not found", **kwargs) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)


class ForbiddenError(GeoServerError):
    def __init__(self, message: str = "forbidden", **kwargs) -> None:
        kwargs.setdefault("status_code", 405)
        super().__init__(message, **kwargs)


class NotEmptyError(GeoServerError):
    """GeoServer refused a delete because the target still has children."""

    def __init__(self, message: str = "workspace is not empty", **kwargs) -> None:
        kwargs.setdefault("status_code", 403)
        super().__init__(message, **kwargs)


class UnknownResponseError(GeoServerError):
    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"unknown error: {status_code} - {body}", status_code=status_code, body=body)
