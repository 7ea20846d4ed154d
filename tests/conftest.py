"""Pytest fixtures: an in-memory GeoServer behind httpx.MockTransport."""

import httpx
import pytest

from geoserver_rest import GeoServerClient

BASE_URL = "http://geoserver.test/geoserver/rest"
PREFIX = "/geoserver/rest"


class FakeGeoServer:
    """Answers canned (status, body) pairs per (method, path) and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method: str, path: str, status: int = 200, body: str = ""):
        self.routes[(method, path)] = (status, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(PREFIX):
            path = path[len(PREFIX):]
        status, body = self.routes.get((request.method, path), (500, f"no route for {request.method} {path}"))
        return httpx.Response(status, text=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self):
        return [(r.method, r.url.path[len(PREFIX):]) for r in self.requests]


@pytest.fixture
def geoserver():
    return FakeGeoServer()


@pytest.fixture
def client(geoserver):
    http_client = httpx.Client(transport=httpx.MockTransport(geoserver.handle))
    with GeoServerClient(BASE_URL, "admin", "geoserver", http_client=http_client) as gs:
        yield gs
    http_client.close()


def collection(collection_tag: str, item_tag: str, *names: str) -> str:
    """Build a GeoServer collection listing with atom links."""
    items = "".join(
        f"<{item_tag}><name>{name}</name>"
        f'<atom:link xmlns:atom="http://www.w3.org/2005/Atom" rel="alternate" '
        f'href="{BASE_URL}/{item_tag}/{name}.xml" type="application/xml"/>'
        f"</{item_tag}>"
        for name in names
    )
    return f"<{collection_tag}>{items}</{collection_tag}>"


@pytest.fixture
def listing():
    return collection
