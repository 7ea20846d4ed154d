"""
Published layer and layer group schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel
from .common import BoundingBox, MetadataEntry, WorkspaceRef


class StyleRef(XmlModel):
    name: Optional[str] = None


class LayerStyles(XmlModel):
    """Alternate styles of a layer; GeoServer tags the set with a collection class."""

    collection_class: Optional[str] = Field(default=None, alias="@class")
    styles: List[StyleRef] = Field(default_factory=list, alias="style")


class LayerResource(XmlModel):
    resource_class: Optional[str] = Field(default=None, alias="@class")
    name: Optional[str] = None


class Attribution(XmlModel):
    title: Optional[str] = None
    href: Optional[str] = None
    logo_url: Optional[str] = Field(default=None, alias="logoURL")
    logo_width: Optional[int] = Field(default=None, alias="logoWidth")
    logo_height: Optional[int] = Field(default=None, alias="logoHeight")
    logo_type: Optional[str] = Field(default=None, alias="logoType")


class Layer(XmlModel):
    xml_tag = "layer"

    name: Optional[str] = None
    path: Optional[str] = None
    type: Optional[str] = None
    default_style: Optional[str] = Field(default=None, alias="defaultStyle>name")
    styles: Optional[LayerStyles] = None
    resource: Optional[LayerResource] = None
    opaque: Optional[bool] = None
    metadata: List[MetadataEntry] = Field(default_factory=list, alias="metadata>entry")
    attribution: Optional[Attribution] = None


class PublishedRef(XmlModel):
    """A layer or nested group inside a layer group."""

    type: Optional[str] = Field(default=None, alias="@type")
    name: Optional[str] = None


class MetadataLink(XmlModel):
    type: Optional[str] = None
    metadata_type: Optional[str] = Field(default=None, alias="metadataType")
    content: Optional[str] = None


class LayerGroup(XmlModel):
    xml_tag = "layerGroup"

    name: Optional[str] = None
    workspace: Optional[WorkspaceRef] = None
    mode: Optional[str] = None
    title: Optional[str] = None
    abstract: Optional[str] = Field(default=None, alias="abstractTxt")
    publishables: List[PublishedRef] = Field(default_factory=list, alias="publishables>published")
    styles: List[StyleRef] = Field(default_factory=list, alias="styles>style")
    bounds: Optional[BoundingBox] = None
    metadata_links: List[MetadataLink] = Field(default_factory=list, alias="metadataLinks>metadataLink")
    keywords: List[str] = Field(default_factory=list, alias="keywords>string")
