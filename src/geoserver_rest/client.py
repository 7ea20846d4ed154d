"""
The GeoServer REST client: the transport plus every resource family.
"""

from __future__ import annotations

from typing import Optional

import httpx

from .config import GeoServerSettings, load_settings
from .resources import (
    BlobstoreMixin,
    DatastoreMixin,
    DiskQuotaMixin,
    FeatureTypeMixin,
    GridsetMixin,
    GwcLayerMixin,
    LayerGroupMixin,
    LayerMixin,
    LayerRuleMixin,
    ResourceStoreMixin,
    ServiceWmsMixin,
    StyleMixin,
    UrlCheckMixin,
    UserMixin,
    WmsLayerMixin,
    WmsStoreMixin,
    WmtsLayerMixin,
    WmtsStoreMixin,
    WorkspaceMixin,
)
from .transport import BaseClient


class GeoServerClient(
    WorkspaceMixin,
    DatastoreMixin,
    FeatureTypeMixin,
    LayerMixin,
    LayerGroupMixin,
    StyleMixin,
    WmsStoreMixin,
    WmtsStoreMixin,
    WmsLayerMixin,
    WmtsLayerMixin,
    GridsetMixin,
    BlobstoreMixin,
    DiskQuotaMixin,
    GwcLayerMixin,
    UrlCheckMixin,
    LayerRuleMixin,
    UserMixin,
    ServiceWmsMixin,
    ResourceStoreMixin,
    BaseClient,
):
    """
    Client for one GeoServer REST root.

    Usage:
        with GeoServerClient("http://localhost:8080/geoserver/rest", "admin", "geoserver") as gs:
            for store in gs.list_datastores("topp"):
                print(store.name, store.type)

    GeoWebCache calls (gridsets, blobstores, disk quota, cached layers) need a
    client built on the GWC root, ``.../geoserver/gwc/rest``.
    """

    @classmethod
    def from_settings(
        cls,
        settings: Optional[GeoServerSettings] = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> "GeoServerClient":
        if settings is None:
            settings = load_settings()
        return cls(
            settings.url,
            settings.username,
            settings.password,
            timeout_seconds=settings.timeout_seconds,
            http_client=http_client,
        )
