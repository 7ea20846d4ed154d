"""
Cascaded WMS and WMTS stores and the layers published from them.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel
from .common import CRS, BoundingBox, MetadataEntry, WorkspaceRef


class _RemoteStore(XmlModel):
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    enabled: Optional[bool] = None
    workspace: Optional[WorkspaceRef] = None
    default: Optional[bool] = Field(default=None, alias="__default")
    disable_on_conn_failure: Optional[bool] = Field(default=None, alias="disableOnConnFailure")
    capabilities_url: Optional[str] = Field(default=None, alias="capabilitiesURL")
    max_connections: Optional[int] = Field(default=None, alias="maxConnections")
    read_timeout: Optional[int] = Field(default=None, alias="readTimeout")
    connect_timeout: Optional[int] = Field(default=None, alias="connectTimeout")


class WmsStore(_RemoteStore):
    xml_tag = "wmsStore"

    type: Optional[str] = "WMS"


class WmtsStore(_RemoteStore):
    xml_tag = "wmtsStore"

    type: Optional[str] = "WMTS"


class _RemoteLayer(XmlModel):
    name: Optional[str] = None
    native_name: Optional[str] = Field(default=None, alias="nativeName")
    title: Optional[str] = None
    abstract: Optional[str] = None
    native_crs: Optional[CRS] = Field(default=None, alias="nativeCRS")
    srs: Optional[str] = None
    native_bounding_box: Optional[BoundingBox] = Field(default=None, alias="nativeBoundingBox")
    lat_lon_bounding_box: Optional[BoundingBox] = Field(default=None, alias="latLonBoundingBox")
    projection_policy: Optional[str] = Field(default=None, alias="projectionPolicy")
    enabled: Optional[bool] = None
    metadata: List[MetadataEntry] = Field(default_factory=list, alias="metadata>entry")


class WmsLayer(_RemoteLayer):
    xml_tag = "wmsLayer"


class WmtsLayer(_RemoteLayer):
    xml_tag = "wmtsLayer"
