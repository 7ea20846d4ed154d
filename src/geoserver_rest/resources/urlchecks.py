import logging
from typing import List

from ..exceptions import NotFoundError
from ..models import RegexUrlCheck
from ..status import UPDATE_ERRORS
from ..transport import segment

logger = logging.getLogger(__name__)

URL_CHECK_GET_ERRORS = {404: NotFoundError}


class UrlCheckMixin:
    def urlcheck_path(self, name: str) -> str:
        return f"/urlchecks/{segment(name)}"

    def list_urlchecks(self) -> List[RegexUrlCheck]:
        return self._list("/urlchecks", "urlChecks", "urlCheck", self.get_urlcheck)

    def get_urlcheck(self, name: str) -> RegexUrlCheck:
        return self._get(
            self.urlcheck_path(name),
            RegexUrlCheck,
            errors=URL_CHECK_GET_ERRORS,
            messages={404: "URL check not found"},
        )

    def create_urlcheck(self, check: RegexUrlCheck) -> None:
        self._send("POST", "/urlchecks", check)
        logger.debug("Created URL check %s", check.name)

    def update_urlcheck(self, name: str, check: RegexUrlCheck) -> None:
        self._send("PUT", self.urlcheck_path(name), check, ok=(200,), errors=UPDATE_ERRORS)

    def delete_urlcheck(self, name: str) -> None:
        self._delete(self.urlcheck_path(name))
