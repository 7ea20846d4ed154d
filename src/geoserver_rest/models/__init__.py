from .common import CRS, BoundingBox, ConnectionParameter, MetadataEntry, WorkspaceRef
from .datastore import Datastore
from .featuretype import FeatureType, FeatureTypeAttribute
from .gwc import (
    FileBlobStore,
    GridSubset,
    Gridset,
    GwcQuotaConfiguration,
    GwcWmsLayer,
    LayerQuota,
    Quota,
    S3BlobStore,
)
from .layer import (
    Attribution,
    Layer,
    LayerGroup,
    LayerResource,
    LayerStyles,
    MetadataLink,
    PublishedRef,
    StyleRef,
)
from .security import LayerRule, LayerRules, User, Users
from .settings import CacheConfiguration, ServiceVersion, ServiceWms, Watermark
from .style import Style, style_content_type
from .urlcheck import RegexUrlCheck
from .wms import WmsLayer, WmsStore, WmtsLayer, WmtsStore
from .workspace import Workspace

__all__ = [
    "Attribution",
    "BoundingBox",
    "CRS",
    "CacheConfiguration",
    "ConnectionParameter",
    "Datastore",
    "FeatureType",
    "FeatureTypeAttribute",
    "FileBlobStore",
    "GridSubset",
    "Gridset",
    "GwcQuotaConfiguration",
    "GwcWmsLayer",
    "Layer",
    "LayerGroup",
    "LayerQuota",
    "LayerResource",
    "LayerRule",
    "LayerRules",
    "LayerStyles",
    "MetadataEntry",
    "MetadataLink",
    "PublishedRef",
    "Quota",
    "RegexUrlCheck",
    "S3BlobStore",
    "ServiceVersion",
    "ServiceWms",
    "Style",
    "StyleRef",
    "User",
    "Users",
    "Watermark",
    "WmsLayer",
    "WmsStore",
    "WmtsLayer",
    "WmtsStore",
    "Workspace",
    "WorkspaceRef",
    "style_content_type",
]
