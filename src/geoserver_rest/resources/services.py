import logging
from typing import Optional

from ..models import ServiceWms
from ..status import UPDATE_ERRORS
from ..transport import require_workspace, segment

logger = logging.getLogger(__name__)


class ServiceWmsMixin:
    def wms_settings_path(self, workspace: Optional[str] = None) -> str:
        if workspace:
            return f"/services/wms/workspaces/{segment(workspace)}/settings"
        return "/services/wms/settings"

    def get_service_wms(self, workspace: Optional[str] = None) -> ServiceWms:
        return self._get(self.wms_settings_path(workspace), ServiceWms)

    def update_service_wms(self, workspace: Optional[str], settings: ServiceWms) -> None:
        """
        Replace the WMS settings, globally or for one workspace.

        GeoServer only accepts the service under the name ``WMS``, so the
        name is overwritten on a copy before sending.
        """
        payload = settings.model_copy(update={"name": "WMS"})
        self._send("PUT", self.wms_settings_path(workspace), payload, ok=(200, 201), errors=UPDATE_ERRORS)

    def delete_workspace_service_wms(self, workspace: str) -> None:
        self._delete(self.wms_settings_path(require_workspace(workspace)))
        logger.debug("Removed WMS settings of workspace %s", workspace)
