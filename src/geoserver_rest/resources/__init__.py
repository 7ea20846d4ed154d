from .datastores import DatastoreMixin
from .featuretypes import FeatureTypeMixin
from .gwc import BlobstoreMixin, DiskQuotaMixin, GridsetMixin, GwcLayerMixin
from .layers import LayerGroupMixin, LayerMixin
from .resource_store import ResourceStoreMixin
from .security import LayerRuleMixin, UserMixin
from .services import ServiceWmsMixin
from .styles import StyleMixin
from .urlchecks import UrlCheckMixin
from .wms import WmsLayerMixin, WmsStoreMixin, WmtsLayerMixin, WmtsStoreMixin
from .workspaces import WorkspaceMixin

__all__ = [
    "BlobstoreMixin",
    "DatastoreMixin",
    "DiskQuotaMixin",
    "FeatureTypeMixin",
    "GridsetMixin",
    "GwcLayerMixin",
    "LayerGroupMixin",
    "LayerMixin",
    "LayerRuleMixin",
    "ResourceStoreMixin",
    "ServiceWmsMixin",
    "StyleMixin",
    "UrlCheckMixin",
    "UserMixin",
    "WmsLayerMixin",
    "WmsStoreMixin",
    "WmtsLayerMixin",
    "WmtsStoreMixin",
    "WorkspaceMixin",
]
