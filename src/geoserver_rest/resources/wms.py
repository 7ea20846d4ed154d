"""
Cascaded WMS and WMTS stores and their layers.

Both flavours have the same shape; they differ in path segments, collection
element names and model. WMTS layers sit under a plain ``layers`` segment.
"""

import logging
from typing import List, Optional

from ..models import WmsLayer, WmsStore, WmtsLayer, WmtsStore
from ..status import UPDATE_ERRORS
from ..transport import flag, require_workspace, segment

logger = logging.getLogger(__name__)


class WmsStoreMixin:
    def wmsstores_path(self, workspace: str) -> str:
        return f"/workspaces/{segment(require_workspace(workspace))}/wmsstores"

    def wmsstore_path(self, workspace: str, name: str) -> str:
        return f"{self.wmsstores_path(workspace)}/{segment(name)}"

    def list_wmsstores(self, workspace: str) -> List[WmsStore]:
        return self._list(
            self.wmsstores_path(workspace),
            "wmsStores",
            "wmsStore",
            lambda name: self.get_wmsstore(workspace, name),
        )

    def get_wmsstore(self, workspace: str, name: str) -> WmsStore:
        return self._get(self.wmsstore_path(workspace, name), WmsStore)

    def create_wmsstore(self, workspace: str, store: WmsStore) -> None:
        self._send("POST", self.wmsstores_path(workspace), store)
        logger.debug("Created WMS store %s:%s", workspace, store.name)

    def update_wmsstore(self, workspace: str, name: str, store: WmsStore) -> None:
        self._send("PUT", self.wmsstore_path(workspace, name), store, ok=(200,), errors=UPDATE_ERRORS)

    def delete_wmsstore(self, workspace: str, name: str, recurse: bool = False) -> None:
        self._delete(self.wmsstore_path(workspace, name), params={"recurse": flag(recurse)})


class WmtsStoreMixin:
    def wmtsstores_path(self, workspace: str) -> str:
        return f"/workspaces/{segment(require_workspace(workspace))}/wmtsstores"

    def wmtsstore_path(self, workspace: str, name: str) -> str:
        return f"{self.wmtsstores_path(workspace)}/{segment(name)}"

    def list_wmtsstores(self, workspace: str) -> List[WmtsStore]:
        return self._list(
            self.wmtsstores_path(workspace),
            "wmtsStores",
            "wmtsStore",
            lambda name: self.get_wmtsstore(workspace, name),
        )

    def get_wmtsstore(self, workspace: str, name: str) -> WmtsStore:
        return self._get(self.wmtsstore_path(workspace, name), WmtsStore)

    def create_wmtsstore(self, workspace: str, store: WmtsStore) -> None:
        self._send("POST", self.wmtsstores_path(workspace), store)
        logger.debug("Created WMTS store %s:%s", workspace, store.name)

    def update_wmtsstore(self, workspace: str, name: str, store: WmtsStore) -> None:
        self._send("PUT", self.wmtsstore_path(workspace, name), store, ok=(200,), errors=UPDATE_ERRORS)

    def delete_wmtsstore(self, workspace: str, name: str, recurse: bool = False) -> None:
        self._delete(self.wmtsstore_path(workspace, name), params={"recurse": flag(recurse)})


class WmsLayerMixin:
    def wmslayers_path(self, workspace: str, store: Optional[str] = None) -> str:
        workspace = require_workspace(workspace)
        if store:
            return f"/workspaces/{segment(workspace)}/wmsstores/{segment(store)}/wmslayers"
        return f"/workspaces/{segment(workspace)}/wmslayers"

    def wmslayer_path(self, workspace: str, store: Optional[str], name: str) -> str:
        return f"{self.wmslayers_path(workspace, store)}/{segment(name)}"

    def list_wmslayers(self, workspace: str, store: Optional[str] = None) -> List[WmsLayer]:
        return self._list(
            self.wmslayers_path(workspace, store),
            "wmsLayers",
            "wmsLayer",
            lambda name: self.get_wmslayer(workspace, store, name),
        )

    def get_wmslayer(self, workspace: str, store: Optional[str], name: str) -> WmsLayer:
        return self._get(self.wmslayer_path(workspace, store, name), WmsLayer)

    def create_wmslayer(self, workspace: str, store: Optional[str], layer: WmsLayer) -> None:
        self._send("POST", self.wmslayers_path(workspace, store), layer)

    def update_wmslayer(self, workspace: str, store: Optional[str], name: str, layer: WmsLayer) -> None:
        self._send("PUT", self.wmslayer_path(workspace, store, name), layer, ok=(200,), errors=UPDATE_ERRORS)

    def delete_wmslayer(self, workspace: str, store: Optional[str], name: str, recurse: bool = False) -> None:
        self._delete(self.wmslayer_path(workspace, store, name), params={"recurse": flag(recurse)})


class WmtsLayerMixin:
    def wmtslayers_path(self, workspace: str, store: Optional[str] = None) -> str:
        workspace = require_workspace(workspace)
        if store:
            return f"/workspaces/{segment(workspace)}/wmtsstores/{segment(store)}/layers"
        return f"/workspaces/{segment(workspace)}/layers"

    def wmtslayer_path(self, workspace: str, store: Optional[str], name: str) -> str:
        return f"{self.wmtslayers_path(workspace, store)}/{segment(name)}"

    def list_wmtslayers(self, workspace: str, store: Optional[str] = None) -> List[WmtsLayer]:
        return self._list(
            self.wmtslayers_path(workspace, store),
            "wmtsLayers",
            "wmtsLayer",
            lambda name: self.get_wmtslayer(workspace, store, name),
        )

    def get_wmtslayer(self, workspace: str, store: Optional[str], name: str) -> WmtsLayer:
        return self._get(self.wmtslayer_path(workspace, store, name), WmtsLayer)

    def create_wmtslayer(self, workspace: str, store: Optional[str], layer: WmtsLayer) -> None:
        self._send("POST", self.wmtslayers_path(workspace, store), layer)

    def update_wmtslayer(self, workspace: str, store: Optional[str], name: str, layer: WmtsLayer) -> None:
        self._send("PUT", self.wmtslayer_path(workspace, store, name), layer, ok=(200,), errors=UPDATE_ERRORS)

    def delete_wmtslayer(self, workspace: str, store: Optional[str], name: str, recurse: bool = False) -> None:
        self._delete(self.wmtslayer_path(workspace, store, name), params={"recurse": flag(recurse)})
