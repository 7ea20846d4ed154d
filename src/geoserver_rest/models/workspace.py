from __future__ import annotations

from typing import Optional

from ..codec import XmlModel


class Workspace(XmlModel):
    xml_tag = "workspace"

    name: Optional[str] = None
    isolated: Optional[bool] = None
