"""
Typed client for the GeoServer REST administration API.
"""

import logging

from .client import GeoServerClient
from .config import GeoServerSettings, load_settings
from .exceptions import (
    ForbiddenError,
    GeoServerError,
    NotEmptyError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    UnknownResponseError,
    XMLDecodeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ForbiddenError",
    "GeoServerClient",
    "GeoServerError",
    "GeoServerSettings",
    "NotEmptyError",
    "NotFoundError",
    "TransportError",
    "UnauthorizedError",
    "UnknownResponseError",
    "XMLDecodeError",
    "load_settings",
]
