"""
HTTP status classification for GeoServer REST operations.

Each table maps the status codes an operation documents to the exception
raised for them. Codes listed in ``ok`` succeed; anything else becomes an
``UnknownResponseError``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Type

from .exceptions import (
    ForbiddenError,
    GeoServerError,
    NotEmptyError,
    NotFoundError,
    UnauthorizedError,
    UnknownResponseError,
)

ErrorTable = Mapping[int, Type[GeoServerError]]

LIST_ERRORS: Dict[int, Type[GeoServerError]] = {
    401: UnauthorizedError,
}

GET_ERRORS: Dict[int, Type[GeoServerError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
}

CREATE_ERRORS: Dict[int, Type[GeoServerError]] = {
    401: UnauthorizedError,
}

UPDATE_ERRORS: Dict[int, Type[GeoServerError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
    405: ForbiddenError,
}

DELETE_ERRORS: Dict[int, Type[GeoServerError]] = {
    401: UnauthorizedError,
    403: NotEmptyError,
    404: NotFoundError,
    405: ForbiddenError,
}


def raise_for_status(
    status_code: int,
    body: str,
    *,
    ok: Iterable[int] = (200,),
    errors: ErrorTable = GET_ERRORS,
    messages: Optional[Mapping[int, str]] = None,
) -> None:
    if status_code in ok:
        return

    error_cls = errors.get(status_code)
    if error_cls is None:
        raise UnknownResponseError(status_code, body)

    message = (messages or {}).get(status_code)
    if message is None:
        raise error_cls(status_code=status_code, body=body)
    raise error_cls(message, status_code=status_code, body=body)
