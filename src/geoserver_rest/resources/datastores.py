import logging
from typing import List

from ..models import Datastore
from ..status import UPDATE_ERRORS
from ..transport import flag, segment

logger = logging.getLogger(__name__)


class DatastoreMixin:
    def datastores_path(self, workspace: str) -> str:
        return f"/workspaces/{segment(workspace)}/datastores"

    def datastore_path(self, workspace: str, name: str) -> str:
        return f"/workspaces/{segment(workspace)}/datastores/{segment(name)}"

    def list_datastores(self, workspace: str) -> List[Datastore]:
        return self._list(
            self.datastores_path(workspace),
            "dataStores",
            "dataStore",
            lambda name: self.get_datastore(workspace, name),
        )

    def get_datastore(self, workspace: str, name: str) -> Datastore:
        return self._get(self.datastore_path(workspace, name), Datastore)

    def create_datastore(self, workspace: str, datastore: Datastore) -> None:
        self._send("POST", self.datastores_path(workspace), datastore)
        logger.debug("Created datastore %s:%s", workspace, datastore.name)

    def update_datastore(self, workspace: str, name: str, datastore: Datastore) -> None:
        self._send("PUT", self.datastore_path(workspace, name), datastore, ok=(200,), errors=UPDATE_ERRORS)

    def delete_datastore(self, workspace: str, name: str, recurse: bool = False) -> None:
        self._delete(self.datastore_path(workspace, name), params={"recurse": flag(recurse)})
        logger.debug("Deleted datastore %s:%s (recurse=%s)", workspace, name, recurse)
