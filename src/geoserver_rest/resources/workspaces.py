import logging
from typing import List

from ..models import Workspace
from ..status import UPDATE_ERRORS
from ..transport import flag, segment

logger = logging.getLogger(__name__)


class WorkspaceMixin:
    def workspaces_path(self) -> str:
        return "/workspaces"

    def workspace_path(self, name: str) -> str:
        return f"/workspaces/{segment(name)}"

    def list_workspaces(self) -> List[Workspace]:
        """
        Return every workspace, fetched one by one after the collection listing.
        """
        return self._list(self.workspaces_path(), "workspaces", "workspace", self.get_workspace)

    def get_workspace(self, name: str) -> Workspace:
        return self._get(self.workspace_path(name), Workspace)

    def create_workspace(self, workspace: Workspace, default: bool = False) -> None:
        self._send("POST", self.workspaces_path(), workspace, params={"default": flag(default)})
        logger.debug("Created workspace %s", workspace.name)

    def update_workspace(self, name: str, workspace: Workspace) -> None:
        self._send("PUT", self.workspace_path(name), workspace, ok=(200,), errors=UPDATE_ERRORS)

    def delete_workspace(self, name: str, recurse: bool = False) -> None:
        self._delete(self.workspace_path(name), params={"recurse": flag(recurse)})
        logger.debug("Deleted workspace %s (recurse=%s)", name, recurse)
