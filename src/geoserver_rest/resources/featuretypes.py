"""
Feature type operations.

Feature types always live in a workspace; the datastore segment is optional
and, when omitted, GeoServer resolves the workspace's default store.
"""

import logging
from typing import List, Optional

from ..models import FeatureType
from ..status import UPDATE_ERRORS
from ..transport import flag, require_workspace, segment

logger = logging.getLogger(__name__)


class FeatureTypeMixin:
    def featuretypes_path(self, workspace: str, datastore: Optional[str] = None) -> str:
        workspace = require_workspace(workspace)
        if datastore:
            return f"/workspaces/{segment(workspace)}/datastores/{segment(datastore)}/featuretypes"
        return f"/workspaces/{segment(workspace)}/featuretypes"

    def featuretype_path(self, workspace: str, datastore: Optional[str], name: str) -> str:
        return f"{self.featuretypes_path(workspace, datastore)}/{segment(name)}"

    def list_featuretypes(self, workspace: str, datastore: Optional[str] = None) -> List[FeatureType]:
        return self._list(
            self.featuretypes_path(workspace, datastore),
            "featureTypes",
            "featureType",
            lambda name: self.get_featuretype(workspace, datastore, name),
        )

    def get_featuretype(self, workspace: str, datastore: Optional[str], name: str) -> FeatureType:
        return self._get(self.featuretype_path(workspace, datastore, name), FeatureType)

    def create_featuretype(self, workspace: str, datastore: Optional[str], featuretype: FeatureType) -> None:
        self._send("POST", self.featuretypes_path(workspace, datastore), featuretype)
        logger.debug("Created feature type %s:%s", workspace, featuretype.name)

    def update_featuretype(
        self, workspace: str, datastore: Optional[str], name: str, featuretype: FeatureType
    ) -> None:
        self._send(
            "PUT",
            self.featuretype_path(workspace, datastore, name),
            featuretype,
            ok=(200,),
            errors=UPDATE_ERRORS,
        )

    def delete_featuretype(
        self, workspace: str, datastore: Optional[str], name: str, recurse: bool = False
    ) -> None:
        self._delete(self.featuretype_path(workspace, datastore, name), params={"recurse": flag(recurse)})
