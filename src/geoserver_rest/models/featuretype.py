"""
Feature type schema (a vector layer's source description).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel
from .common import CRS, BoundingBox


class FeatureTypeAttribute(XmlModel):
    name: Optional[str] = None
    min_occurs: Optional[int] = Field(default=None, alias="minOccurs")
    max_occurs: Optional[int] = Field(default=None, alias="maxOccurs")
    nillable: Optional[bool] = None
    binding: Optional[str] = None


class FeatureType(XmlModel):
    xml_tag = "featureType"

    name: Optional[str] = None
    native_name: Optional[str] = Field(default=None, alias="nativeName")
    title: Optional[str] = None
    abstract: Optional[str] = None
    keywords: List[str] = Field(default_factory=list, alias="keywords>string")
    native_crs: Optional[CRS] = Field(default=None, alias="nativeCRS")
    srs: Optional[str] = None
    native_bounding_box: Optional[BoundingBox] = Field(default=None, alias="nativeBoundingBox")
    lat_lon_bounding_box: Optional[BoundingBox] = Field(default=None, alias="latLonBoundingBox")
    projection_policy: Optional[str] = Field(default=None, alias="projectionPolicy")
    enabled: Optional[bool] = None
    attributes: List[FeatureTypeAttribute] = Field(default_factory=list, alias="attributes>attribute")
