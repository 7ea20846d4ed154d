"""
GeoWebCache schemas: gridsets, blobstores, disk quota and cached WMS layers.

These documents live under the GWC REST root (``/geoserver/gwc/rest``), not
the GeoServer one.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel


class Gridset(XmlModel):
    xml_tag = "gridSet"

    name: Optional[str] = None
    description: Optional[str] = None
    align_top_left: Optional[bool] = Field(default=None, alias="alignTopLeft")
    meters_per_unit: Optional[float] = Field(default=None, alias="metersPerUnit")
    pixel_size: Optional[float] = Field(default=None, alias="pixelSize")
    tile_height: Optional[int] = Field(default=None, alias="tileHeight")
    tile_width: Optional[int] = Field(default=None, alias="tileWidth")
    y_coordinate_first: Optional[bool] = Field(default=None, alias="yCoordinateFirst")
    extent: List[float] = Field(default_factory=list, alias="extent>coords>double")
    scale_names: List[str] = Field(default_factory=list, alias="scaleNames>string")
    scale_denominators: List[float] = Field(default_factory=list, alias="scaleDenominators>double")
    srs: Optional[int] = Field(default=None, alias="srs>number")


class FileBlobStore(XmlModel):
    xml_tag = "FileBlobStore"

    id: Optional[str] = None
    enabled: Optional[bool] = None
    base_directory: Optional[str] = Field(default=None, alias="baseDirectory")
    file_system_block_size: Optional[int] = Field(default=None, alias="fileSystemBlockSize")


class S3BlobStore(XmlModel):
    xml_tag = "S3BlobStore"

    id: Optional[str] = None
    bucket: Optional[str] = None
    prefix: Optional[str] = None
    aws_access_key: Optional[str] = Field(default=None, alias="awsAccessKey")
    aws_secret_key: Optional[str] = Field(default=None, alias="awsSecretKey")
    access: Optional[str] = None
    endpoint: Optional[str] = None
    max_connections: Optional[int] = Field(default=None, alias="maxConnections")
    use_https: Optional[bool] = Field(default=None, alias="useHTTPS")
    use_gzip: Optional[bool] = Field(default=None, alias="useGzip")
    enabled: Optional[bool] = None
    default: Optional[bool] = Field(default=None, alias="__default")


class Quota(XmlModel):
    value: Optional[int] = None
    units: Optional[str] = None


class LayerQuota(XmlModel):
    layer: Optional[str] = None
    expiration_policy_name: Optional[str] = Field(default=None, alias="expirationPolicyName")
    quota: Optional[Quota] = None


class GwcQuotaConfiguration(XmlModel):
    xml_tag = "gwcQuotaConfiguration"

    enabled: Optional[bool] = None
    cache_clean_up_frequency: Optional[int] = Field(default=None, alias="cacheCleanUpFrequency")
    cache_clean_up_units: Optional[str] = Field(default=None, alias="cacheCleanUpUnits")
    max_concurrent_clean_ups: Optional[int] = Field(default=None, alias="maxConcurrentCleanUps")
    global_expiration_policy_name: Optional[str] = Field(default=None, alias="globalExpirationPolicyName")
    global_quota: Optional[Quota] = Field(default=None, alias="globalQuota")
    layer_quotas: List[LayerQuota] = Field(default_factory=list, alias="layerQuotas>LayerQuota")


class GridSubset(XmlModel):
    grid_set_name: Optional[str] = Field(default=None, alias="gridSetName")
    min_cached_level: Optional[int] = Field(default=None, alias="minCachedLevel")
    max_cached_level: Optional[int] = Field(default=None, alias="maxCachedLevel")


class GwcWmsLayer(XmlModel):
    """A layer GeoWebCache caches by calling a remote WMS."""

    xml_tag = "wmsLayer"

    name: Optional[str] = None
    enabled: Optional[bool] = None
    blob_store_id: Optional[str] = Field(default=None, alias="blobStoreId")
    mime_formats: List[str] = Field(default_factory=list, alias="mimeFormats>string")
    grid_subsets: List[GridSubset] = Field(default_factory=list, alias="gridSubsets>gridSubset")
    meta_width_height: List[int] = Field(default_factory=list, alias="metaWidthHeight>int")
    expire_cache: Optional[int] = Field(default=None, alias="expireCache")
    expire_clients: Optional[int] = Field(default=None, alias="expireClients")
    gutter: Optional[int] = None
    backend_timeout: Optional[int] = Field(default=None, alias="backendTimeout")
    cache_bypass_allowed: Optional[bool] = Field(default=None, alias="cacheBypassAllowed")
    wms_url: Optional[str] = Field(default=None, alias="wmsUrl>string")
    wms_layers: Optional[str] = Field(default=None, alias="wmsLayers")
    wms_version: Optional[str] = Field(default=None, alias="wmsVersion")
    vendor_parameters: Optional[str] = Field(default=None, alias="vendorParameters")
    transparent: Optional[bool] = None
    bg_color: Optional[str] = Field(default=None, alias="bgColor")
