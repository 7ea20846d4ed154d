"""
Raw files in the GeoServer data directory (``/rest/resource``).
"""

import logging

from ..exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

RESOURCE_GET_ERRORS = {404: NotFoundError}
RESOURCE_PUT_ERRORS = {404: NotFoundError, 405: ForbiddenError}
RESOURCE_PUT_MESSAGES = {
    404: "source path that doesn't exist",
    405: "PUT to directory or copy where source path is directory",
}


def _file_path(path: str, extension: str) -> str:
    if not extension:
        raise ValueError("resource operations are only possible for files")
    return f"/resource/{path}.{extension}"


class ResourceStoreMixin:
    def get_resource(self, path: str, extension: str) -> str:
        return self._get_text(
            _file_path(path, extension),
            errors=RESOURCE_GET_ERRORS,
            messages={404: "resource not found"},
        )

    def create_resource(self, path: str, extension: str, content: str) -> None:
        self._put_resource(path, extension, content)
        logger.debug("Created resource %s.%s", path, extension)

    def update_resource(self, path: str, extension: str, content: str) -> None:
        self._put_resource(path, extension, content)

    def _put_resource(self, path: str, extension: str, content: str) -> None:
        target = _file_path(path, extension)
        if not content:
            raise ValueError("resource content must be defined")
        self._send(
            "PUT",
            target,
            data=content,
            ok=(200, 201),
            errors=RESOURCE_PUT_ERRORS,
            messages=RESOURCE_PUT_MESSAGES,
        )

    def delete_resource(self, path: str) -> None:
        self._delete(f"/resource/{path}")
