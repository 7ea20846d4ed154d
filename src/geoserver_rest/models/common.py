"""
Building blocks shared by several GeoServer resource schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..codec import XmlModel


class WorkspaceRef(XmlModel):
    name: Optional[str] = None


class CRS(XmlModel):
    """A CRS as GeoServer writes it: ``<crs class="projected">EPSG:2154</crs>`` or plain text."""

    crs_class: Optional[str] = Field(default=None, alias="@class")
    value: str = Field(default="", alias="#text")


class BoundingBox(XmlModel):
    minx: Optional[float] = None
    maxx: Optional[float] = None
    miny: Optional[float] = None
    maxy: Optional[float] = None
    crs: Optional[CRS] = None


class MetadataEntry(XmlModel):
    """One ``<entry key="...">`` of a metadata map. The value is raw inner XML: text stays escaped, nested elements stay verbatim."""

    key: str = Field(default="", alias="@key")
    value: str = Field(default="", alias="#inner")


class ConnectionParameter(XmlModel):
    key: str = Field(default="", alias="@key")
    value: str = Field(default="", alias="#text")
