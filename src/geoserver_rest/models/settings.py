"""
WMS service settings, global or per workspace.

GeoServer spells the abstract element ``abstrct``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel
from .common import MetadataEntry, WorkspaceRef


class Watermark(XmlModel):
    enabled: Optional[bool] = None
    position: Optional[str] = None
    transparency: Optional[int] = None


class CacheConfiguration(XmlModel):
    enabled: Optional[bool] = None
    max_entry_size: Optional[int] = Field(default=None, alias="maxEntrySize")
    max_entries: Optional[int] = Field(default=None, alias="maxEntries")


class ServiceVersion(XmlModel):
    version: Optional[str] = None


class ServiceWms(XmlModel):
    xml_tag = "wms"

    name: Optional[str] = None
    enabled: Optional[bool] = None
    title: Optional[str] = None
    maintainer: Optional[str] = None
    abstract: Optional[str] = Field(default=None, alias="abstrct")
    access_constraints: Optional[str] = Field(default=None, alias="accessConstraints")
    online_resource: Optional[str] = Field(default=None, alias="onlineResource")
    verbose: Optional[bool] = None
    watermark: Optional[Watermark] = None
    interpolation: Optional[str] = None
    cite_compliant: Optional[bool] = Field(default=None, alias="citeCompliant")
    max_buffer: Optional[int] = Field(default=None, alias="maxBuffer")
    dynamic_styling_disabled: Optional[bool] = Field(default=None, alias="dynamicStylingDisabled")
    metadata: List[MetadataEntry] = Field(default_factory=list, alias="metadata>entry")
    keywords: List[str] = Field(default_factory=list, alias="keywords>string")
    get_feature_info_mime_type_checking_enabled: Optional[bool] = Field(
        default=None, alias="getFeatureInfoMimeTypeCheckingEnabled"
    )
    max_request_memory: Optional[int] = Field(default=None, alias="maxRequestMemory")
    fees: Optional[str] = None
    max_rendering_errors: Optional[int] = Field(default=None, alias="maxRenderingErrors")
    max_rendering_time: Optional[int] = Field(default=None, alias="maxRenderingTime")
    workspace: Optional[WorkspaceRef] = None
    versions: List[ServiceVersion] = Field(default_factory=list, alias="versions>org.geotools.util.Version")
    schema_base_url: Optional[str] = Field(default=None, alias="schemaBaseURL")
    bbox_for_each_crs: Optional[bool] = Field(default=None, alias="bboxForEachCRS")
    get_map_mime_type_checking_enabled: Optional[bool] = Field(default=None, alias="getMapMimeTypeCheckingEnabled")
    features_reprojection_disabled: Optional[bool] = Field(default=None, alias="featuresReprojectionDisabled")
    max_requested_dimension_values: Optional[int] = Field(default=None, alias="maxRequestedDimensionValues")
    cache_configuration: Optional[CacheConfiguration] = Field(default=None, alias="cacheConfiguration")
    remote_style_max_request_time: Optional[int] = Field(default=None, alias="remoteStyleMaxRequestTime")
    remote_style_timeout: Optional[int] = Field(default=None, alias="remoteStyleTimeout")
    default_group_style_enabled: Optional[bool] = Field(default=None, alias="defaultGroupStyleEnabled")
    transform_feature_info_disabled: Optional[bool] = Field(default=None, alias="transformFeatureInfoDisabled")
    auto_escape_template_values: Optional[bool] = Field(default=None, alias="autoEscapeTemplateValues")
    root_layer_title: Optional[str] = Field(default=None, alias="rootLayerTitle")
