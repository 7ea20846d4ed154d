"""
Layer access rules and user/group service users.

Neither collection has per-item GET endpoints, so single lookups scan the
collection and raise ``NotFoundError`` when nothing matches.
"""

import logging
from typing import List, Optional

from ..exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from ..models import LayerRule, LayerRules, User, Users
from ..status import CREATE_ERRORS, LIST_ERRORS, UPDATE_ERRORS, raise_for_status
from ..transport import segment

logger = logging.getLogger(__name__)

ACL_LAYERS = "/security/acl/layers"

ACL_UPDATE_ERRORS = {401: UnauthorizedError, 405: ForbiddenError, 409: NotFoundError}

NOT_EMPTY_MESSAGE = {403: "service name is not empty"}


class LayerRuleMixin:
    def get_layer_rules(self) -> List[LayerRule]:
        status, body = self.do_request("GET", ACL_LAYERS)
        raise_for_status(status, body, errors=LIST_ERRORS)
        if not body.strip():
            return []
        return LayerRules.from_xml(body).rules

    def get_layer_rule(self, resource: str) -> LayerRule:
        for rule in self.get_layer_rules():
            if rule.resource == resource:
                return rule
        raise NotFoundError("rule not found")

    def create_layer_rule(self, rule: LayerRule) -> None:
        self._send("POST", ACL_LAYERS, LayerRules(rules=[rule]), accept=None, ok=(200,), errors=CREATE_ERRORS)
        logger.debug("Created layer rule %s", rule.resource)

    def update_layer_rule(self, rule: LayerRule) -> None:
        self._send("PUT", ACL_LAYERS, LayerRules(rules=[rule]), accept=None, ok=(200,), errors=ACL_UPDATE_ERRORS)

    def delete_layer_rule(self, resource: str) -> None:
        self._delete(f"{ACL_LAYERS}/{segment(resource)}", messages=NOT_EMPTY_MESSAGE)


class UserMixin:
    def users_path(self, service: Optional[str] = None) -> str:
        return f"/usergroup/service/{segment(service)}/users" if service else "/usergroup/users"

    def user_path(self, service: Optional[str], name: str) -> str:
        if service:
            return f"/usergroup/service/{segment(service)}/user/{segment(name)}"
        return f"/usergroup/user/{segment(name)}"

    def list_users(self, service: Optional[str] = None) -> List[User]:
        status, body = self.do_request("GET", self.users_path(service))
        raise_for_status(status, body, errors=LIST_ERRORS)
        if not body.strip():
            return []
        return Users.from_xml(body).users

    def get_user(self, service: Optional[str], name: str) -> User:
        for user in self.list_users(service):
            if user.user_name == name:
                return user
        raise NotFoundError("user not found")

    def create_user(self, service: Optional[str], user: User) -> None:
        self._send("POST", self.users_path(service), user, accept=None)
        logger.debug("Created user %s", user.user_name)

    def update_user(self, service: Optional[str], name: str, user: User) -> None:
        self._send("POST", self.user_path(service, name), user, accept=None, ok=(200,), errors=UPDATE_ERRORS)

    def delete_user(self, service: Optional[str], name: str) -> None:
        self._delete(self.user_path(service, name), messages=NOT_EMPTY_MESSAGE)
