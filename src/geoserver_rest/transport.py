"""
HTTP transport for the GeoServer REST API.

Purpose:
- Performs one authenticated request against the configured REST root
- Hosts the generic get / list / send / delete helpers that every resource
  family is built from

Status codes are never interpreted in ``do_request``; the helpers classify
them through ``status.raise_for_status`` with the table of the operation.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx

from . import codec
from .exceptions import TransportError
from .status import (
    CREATE_ERRORS,
    DELETE_ERRORS,
    GET_ERRORS,
    LIST_ERRORS,
    ErrorTable,
    raise_for_status,
)

logger = logging.getLogger(__name__)

XML = "application/xml"

M = TypeVar("M", bound=codec.XmlModel)
T = TypeVar("T")


def flag(value: bool) -> str:
    """Render a boolean query parameter the way GeoServer expects it."""
    return "true" if value else "false"


def segment(name: str) -> str:
    """Quote one path segment so a name holding ``/``, ``?`` or ``#`` stays inside it."""
    return quote(str(name), safe="")


def require_workspace(workspace: Optional[str]) -> str:
    if not workspace:
        raise ValueError("workspace cannot be empty")
    return workspace


class BaseClient:
    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        *,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.username = username or ""
        self.password = password or ""
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=timeout_seconds) if timeout_seconds else httpx.Client()
        self.http_client = http_client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, username={self.username!r})"

    # ------------------------------------------------------------------
    # Raw request
    # ------------------------------------------------------------------

    def do_request(
        self,
        method: str,
        path: str,
        data: Optional[str] = None,
        *,
        content_type: Optional[str] = XML,
        accept: Optional[str] = XML,
        params: Optional[Mapping[str, str]] = None,
    ) -> Tuple[int, str]:
        headers: Dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = content_type
        if accept:
            headers["Accept"] = accept

        auth = (self.username, self.password) if self.username and self.password else None
        url = f"{self.url}{path}"

        logger.debug("%s %s params=%s", method, url, dict(params or {}))
        try:
            response = self.http_client.request(
                method,
                url,
                content=data.encode("utf-8") if data is not None else None,
                headers=headers,
                params=params,
                auth=auth,
            )
        except httpx.HTTPError as exc:
            logger.error("GeoServer request %s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response.status_code, response.text

    # ------------------------------------------------------------------
    # Generic resource helpers
    # ------------------------------------------------------------------

    def _get(
        self,
        path: str,
        model: Type[M],
        *,
        ok: Iterable[int] = (200,),
        errors: ErrorTable = GET_ERRORS,
        messages: Optional[Mapping[int, str]] = None,
    ) -> M:
        status, body = self.do_request("GET", path)
        raise_for_status(status, body, ok=ok, errors=errors, messages=messages)
        return codec.decode(model, body)

    def _get_text(
        self,
        path: str,
        *,
        content_type: Optional[str] = XML,
        accept: Optional[str] = XML,
        errors: ErrorTable = GET_ERRORS,
        messages: Optional[Mapping[int, str]] = None,
    ) -> str:
        status, body = self.do_request("GET", path, content_type=content_type, accept=accept)
        raise_for_status(status, body, errors=errors, messages=messages)
        return body

    def _references(self, path: str, collection_tag: str, item_tag: str) -> List[codec.ResourceRef]:
        status, body = self.do_request("GET", path)
        raise_for_status(status, body, errors=LIST_ERRORS)
        return codec.decode_references(body, collection_tag, item_tag)

    def _list(self, path: str, collection_tag: str, item_tag: str, fetch: Callable[[str], T]) -> List[T]:
        """Fetch a collection of references, then each referenced item in order.

        The first failing item fetch propagates; nothing collected so far is returned.
        """
        refs = self._references(path, collection_tag, item_tag)
        logger.debug("%s lists %d %s entries", path, len(refs), item_tag)
        return [fetch(ref.name) for ref in refs]

    def _send(
        self,
        method: str,
        path: str,
        model: Optional[codec.XmlModel] = None,
        *,
        data: Optional[str] = None,
        tag: Optional[str] = None,
        content_type: Optional[str] = XML,
        accept: Optional[str] = XML,
        params: Optional[Mapping[str, str]] = None,
        ok: Iterable[int] = (201,),
        errors: ErrorTable = CREATE_ERRORS,
        messages: Optional[Mapping[int, str]] = None,
    ) -> None:
        if model is not None:
            data = codec.encode(model, tag)
        status, body = self.do_request(method, path, data, content_type=content_type, accept=accept, params=params)
        raise_for_status(status, body, ok=ok, errors=errors, messages=messages)

    def _delete(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        errors: ErrorTable = DELETE_ERRORS,
        messages: Optional[Mapping[int, str]] = None,
    ) -> None:
        status, body = self.do_request("DELETE", path, params=params)
        raise_for_status(status, body, errors=errors, messages=messages)
