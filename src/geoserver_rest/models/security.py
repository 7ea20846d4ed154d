"""
Security schemas: layer access rules and user/group service users.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..codec import XmlModel


class LayerRule(XmlModel):
    """``<rule resource="topp.states.r">ROLE_A,ROLE_B</rule>``"""

    xml_tag = "rule"

    resource: str = Field(default="", alias="@resource")
    roles: str = Field(default="", alias="#text")


class LayerRules(XmlModel):
    xml_tag = "rules"

    rules: List[LayerRule] = Field(default_factory=list, alias="rule")


class User(XmlModel):
    xml_tag = "user"

    user_name: Optional[str] = Field(default=None, alias="userName")
    password: Optional[str] = None
    enabled: Optional[bool] = None


class Users(XmlModel):
    xml_tag = "users"

    users: List[User] = Field(default_factory=list, alias="user")
