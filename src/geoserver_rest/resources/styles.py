"""
Style operations.

A style has two halves on the server: the ``<style>`` metadata record and the
style body (SLD, CSS, YSLD or MBStyle). Bodies are exchanged with the MIME
type returned by ``style_content_type``.
"""

import logging
from typing import List, Optional

from ..models import Style, style_content_type
from ..status import CREATE_ERRORS
from ..transport import flag, segment

logger = logging.getLogger(__name__)


class StyleMixin:
    def styles_path(self, workspace: Optional[str] = None) -> str:
        return f"/workspaces/{segment(workspace)}/styles" if workspace else "/styles"

    def style_path(self, workspace: Optional[str], name: str) -> str:
        return f"{self.styles_path(workspace)}/{segment(name)}"

    def list_styles(self, workspace: Optional[str] = None) -> List[Style]:
        return self._list(
            self.styles_path(workspace), "styles", "style", lambda name: self.get_style(workspace, name)
        )

    def get_style(self, workspace: Optional[str], name: str) -> Style:
        return self._get(self.style_path(workspace, name), Style)

    def get_style_file(
        self, workspace: Optional[str], name: str, format: Optional[str], version: Optional[str] = None
    ) -> str:
        """Download a style body in the representation matching ``format``/``version``."""
        content_type = style_content_type(format, version)
        return self._get_text(self.style_path(workspace, name), content_type=content_type, accept=content_type)

    def create_style(self, workspace: Optional[str], style: Style) -> None:
        """Register the style metadata; the body is sent separately."""
        self._send("POST", self.styles_path(workspace), style, accept=None)
        logger.debug("Created style %s", style.name)

    def upload_style(self, workspace: Optional[str], style: Style, body: str) -> None:
        self._send(
            "POST",
            self.styles_path(workspace),
            data=body,
            content_type=style_content_type(style.format, style.language_version),
            accept=None,
            ok=(201,),
            errors=CREATE_ERRORS,
        )

    def update_style_content(self, workspace: Optional[str], style: Style, body: str) -> None:
        if not style.name:
            raise ValueError("style name cannot be empty")
        self._send(
            "PUT",
            self.style_path(workspace, style.name),
            data=body,
            content_type=style_content_type(style.format, style.language_version),
            accept=None,
            ok=(200,),
            errors=CREATE_ERRORS,
        )
        logger.debug("Replaced body of style %s", style.name)

    def delete_style(
        self, workspace: Optional[str], name: str, purge: bool = False, recurse: bool = False
    ) -> None:
        self._delete(self.style_path(workspace, name), params={"purge": flag(purge), "recurse": flag(recurse)})
