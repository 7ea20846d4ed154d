from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel
from .common import ConnectionParameter, WorkspaceRef


class Datastore(XmlModel):
    xml_tag = "dataStore"

    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    enabled: Optional[bool] = None
    workspace: Optional[WorkspaceRef] = None
    connection_parameters: List[ConnectionParameter] = Field(
        default_factory=list, alias="connectionParameters>entry"
    )
    default: Optional[bool] = Field(default=None, alias="__default")

    def parameter(self, key: str) -> Optional[str]:
        """Value of a connection parameter, or None when the store does not define it."""
        for entry in self.connection_parameters:
            if entry.key == key:
                return entry.value
        return None
