"""
Style metadata schema and the MIME types GeoServer uses for style bodies.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..codec import XmlModel
from .common import WorkspaceRef

SLD_10 = "application/vnd.ogc.sld+xml"
SLD_11 = "application/vnd.ogc.se+xml"
GEOCSS = "application/vnd.geoserver.geocss+css"
YSLD = "application/vnd.geoserver.ysld+yaml"
MBSTYLE = "application/vnd.geoserver.mbstyle+json"


class Style(XmlModel):
    xml_tag = "style"

    name: Optional[str] = None
    workspace: Optional[WorkspaceRef] = None
    format: Optional[str] = None
    language_version: Optional[str] = Field(default=None, alias="languageVersion>version")
    filename: Optional[str] = None


def style_content_type(format: Optional[str], version: Optional[str] = None) -> str:
    """Map a style format (and SLD version) to the content type of its body.

    Unknown formats fall back to SLD 1.0.
    """
    if format == "sld":
        return SLD_10 if version == "1.0.0" else SLD_11
    if format == "css":
        return GEOCSS
    if format == "yaml":
        return YSLD
    if format == "json":
        return MBSTYLE
    return SLD_10
