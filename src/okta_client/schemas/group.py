"""Pydantic schemas for Okta groups.

See: https://developer.okta.com/docs/api/resources/groups#group-model
"""

from datetime import datetime

from pydantic import Field

from .base import OktaModel


class GroupProfile(OktaModel):
    """Group profile object."""

    name: str | None = Field(default=None, description="Group name")
    description: str | None = Field(default=None, description="Group description")
    sam_account_name: str | None = None
    dn: str | None = None
    windows_domain_qualified_name: str | None = None
    external_id: str | None = None


class Group(OktaModel):
    """An Okta group."""

    id: str | None = Field(default=None, description="Unique group id")
    created: datetime | None = None
    last_updated: datetime | None = None
    last_membership_updated: datetime | None = None
    object_class: list[str] | None = None
    type: str | None = Field(default=None, description="OKTA_GROUP, APP_GROUP or BUILT_IN")
    profile: GroupProfile = Field(default_factory=GroupProfile)
