"""
GeoWebCache operations.

Paths are relative to the GWC REST root, so these calls are meant for a
client configured with ``.../geoserver/gwc/rest``. GWC creates resources with
PUT and answers either 200 or 201.
"""

import logging
from typing import List

from ..models import FileBlobStore, Gridset, GwcQuotaConfiguration, GwcWmsLayer, S3BlobStore
from ..status import UPDATE_ERRORS
from ..transport import segment

logger = logging.getLogger(__name__)

PUT_CREATED = (200, 201)


class GridsetMixin:
    def gridset_path(self, name: str) -> str:
        return f"/gridsets/{segment(name)}"

    def list_gridsets(self) -> List[Gridset]:
        return self._list("/gridsets", "gridSets", "gridSet", self.get_gridset)

    def get_gridset(self, name: str) -> Gridset:
        return self._get(self.gridset_path(name), Gridset)

    def create_gridset(self, name: str, gridset: Gridset) -> None:
        self._send("PUT", self.gridset_path(name), gridset, ok=PUT_CREATED)
        logger.debug("Created gridset %s", name)

    def update_gridset(self, name: str, gridset: Gridset) -> None:
        self._send("PUT", self.gridset_path(name), gridset, ok=(200,), errors=UPDATE_ERRORS)

    def delete_gridset(self, name: str) -> None:
        self._delete(self.gridset_path(name))


class BlobstoreMixin:
    def blobstore_path(self, name: str) -> str:
        return f"/blobstores/{segment(name)}"

    def list_blobstore_names(self) -> List[str]:
        return [ref.name for ref in self._references("/blobstores", "blobStores", "blobStore")]

    def get_file_blobstore(self, name: str) -> FileBlobStore:
        return self._get(self.blobstore_path(name), FileBlobStore)

    def create_file_blobstore(self, name: str, blobstore: FileBlobStore) -> None:
        self._send("PUT", self.blobstore_path(name), blobstore, ok=PUT_CREATED)

    def update_file_blobstore(self, name: str, blobstore: FileBlobStore) -> None:
        self._send("PUT", self.blobstore_path(name), blobstore, ok=(200,), errors=UPDATE_ERRORS)

    def delete_file_blobstore(self, name: str) -> None:
        self._delete(self.blobstore_path(name))

    def get_s3_blobstore(self, name: str) -> S3BlobStore:
        return self._get(self.blobstore_path(name), S3BlobStore)

    def create_s3_blobstore(self, name: str, blobstore: S3BlobStore) -> None:
        self._send("PUT", self.blobstore_path(name), blobstore, ok=PUT_CREATED)

    def update_s3_blobstore(self, name: str, blobstore: S3BlobStore) -> None:
        self._send("PUT", self.blobstore_path(name), blobstore, ok=(200,), errors=UPDATE_ERRORS)

    def delete_s3_blobstore(self, name: str) -> None:
        self._delete(self.blobstore_path(name))


class DiskQuotaMixin:
    def get_disk_quota(self) -> GwcQuotaConfiguration:
        # Any status other than 200 is reported as unknown.
        return self._get("/diskquota.xml", GwcQuotaConfiguration, errors={})

    def update_disk_quota(self, quota: GwcQuotaConfiguration) -> None:
        self._send("PUT", "/diskquota.xml", quota, ok=(200,), errors=UPDATE_ERRORS)


class GwcLayerMixin:
    def gwc_layer_path(self, name: str) -> str:
        return f"/layers/{segment(name)}"

    def list_gwc_layer_names(self) -> List[str]:
        return [ref.name for ref in self._references("/layers", "layers", "layer")]

    def get_gwc_layer(self, name: str) -> GwcWmsLayer:
        return self._get(self.gwc_layer_path(name), GwcWmsLayer, ok=(200, 201))

    def create_gwc_layer(self, name: str, layer: GwcWmsLayer) -> None:
        self._send("PUT", self.gwc_layer_path(name), layer, ok=PUT_CREATED)
        logger.debug("Created cached layer %s", name)

    def update_gwc_layer(self, name: str, layer: GwcWmsLayer) -> None:
        self._send("PUT", self.gwc_layer_path(name), layer, ok=(200,), errors=UPDATE_ERRORS)

    def delete_gwc_layer(self, name: str) -> None:
        self._delete(self.gwc_layer_path(name))
