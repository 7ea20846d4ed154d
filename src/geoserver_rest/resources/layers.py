import logging
from typing import List, Optional

from ..models import Layer, LayerGroup
from ..status import UPDATE_ERRORS
from ..transport import flag, segment

logger = logging.getLogger(__name__)


def _scoped(workspace: Optional[str], path: str) -> str:
    return f"/workspaces/{segment(workspace)}{path}" if workspace else path


class LayerMixin:
    def layers_path(self, workspace: Optional[str] = None) -> str:
        return _scoped(workspace, "/layers")

    def layer_path(self, workspace: Optional[str], name: str) -> str:
        return _scoped(workspace, f"/layers/{segment(name)}")

    def list_layers(self, workspace: Optional[str] = None) -> List[Layer]:
        return self._list(
            self.layers_path(workspace), "layers", "layer", lambda name: self.get_layer(workspace, name)
        )

    def get_layer(self, workspace: Optional[str], name: str) -> Layer:
        return self._get(self.layer_path(workspace, name), Layer)

    def update_layer(self, workspace: Optional[str], name: str, layer: Layer) -> None:
        self._send("PUT", self.layer_path(workspace, name), layer, ok=(200,), errors=UPDATE_ERRORS)

    def delete_layer(self, workspace: Optional[str], name: str, recurse: bool = False) -> None:
        self._delete(self.layer_path(workspace, name), params={"recurse": flag(recurse)})
        logger.debug("Deleted layer %s (recurse=%s)", name, recurse)


class LayerGroupMixin:
    def layergroups_path(self, workspace: Optional[str] = None) -> str:
        return _scoped(workspace, "/layergroups")

    def layergroup_path(self, workspace: Optional[str], name: str) -> str:
        return _scoped(workspace, f"/layergroups/{segment(name)}")

    def list_layergroups(self, workspace: Optional[str] = None) -> List[LayerGroup]:
        return self._list(
            self.layergroups_path(workspace),
            "layerGroups",
            "layerGroup",
            lambda name: self.get_layergroup(workspace, name),
        )

    def get_layergroup(self, workspace: Optional[str], name: str) -> LayerGroup:
        return self._get(self.layergroup_path(workspace, name), LayerGroup)

    def create_layergroup(self, workspace: Optional[str], group: LayerGroup) -> None:
        self._send("POST", self.layergroups_path(workspace), group, accept=None)
        logger.debug("Created layer group %s", group.name)

    def update_layergroup(self, workspace: Optional[str], group: LayerGroup) -> None:
        """
        Replace a layer group. The target path is taken from ``group.name``.
        """
        if not group.name:
            raise ValueError("layer group name cannot be empty")
        self._send("PUT", self.layergroup_path(workspace, group.name), group, ok=(200,), errors=UPDATE_ERRORS)

    def delete_layergroup(self, workspace: Optional[str], name: str) -> None:
        self._delete(self.layergroup_path(workspace, name))
