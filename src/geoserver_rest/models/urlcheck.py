from __future__ import annotations

from typing import Optional

from ..codec import XmlModel


class RegexUrlCheck(XmlModel):
    """Allow-list entry for URLs GeoServer may fetch on a client's behalf."""

    xml_tag = "regexUrlCheck"

    name: Optional[str] = None
    description: Optional[str] = None
    regex: Optional[str] = None
    enabled: Optional[bool] = None
