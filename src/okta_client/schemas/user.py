"""Pydantic schemas for Okta users.

See: https://developer.okta.com/docs/api/resources/users#user-model
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import OktaModel


class UserProfile(OktaModel):
    """User profile object (default Okta user type attributes)."""

    login: str | None = Field(default=None, description="Unique login, usually an email")
    first_name: str | None = None
    last_name: str | None = None
    nick_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    second_email: str | None = None
    profile_url: str | None = None
    preferred_language: str | None = None
    user_type: str | None = None
    organization: str | None = None
    title: str | None = None
    division: str | None = None
    department: str | None = None
    cost_center: str | None = None
    employee_number: str | None = None
    mobile_phone: str | None = None
    primary_phone: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country_code: str | None = None


class PasswordHash(OktaModel):
    algorithm: str | None = None
    work_factor: int | None = None
    salt: str | None = None
    value: str | None = None


class UserPassword(OktaModel):
    """Password credential. The value is write-only; an empty object means one is set."""

    value: str | None = None
    hash: PasswordHash | None = None


class RecoveryQuestion(OktaModel):
    question: str | None = None
    answer: str | None = None


class AuthenticationProvider(OktaModel):
    type: str | None = None
    name: str | None = None


class UserCredentials(OktaModel):
    """User credentials object."""

    password: UserPassword | None = None
    recovery_question: RecoveryQuestion | None = Field(default=None, alias="recovery_question")
    provider: AuthenticationProvider | None = None


class User(OktaModel):
    """An Okta user."""

    id: str | None = Field(default=None, description="Unique user id")
    status: str | None = Field(default=None, description="Lifecycle status (ACTIVE, STAGED, ...)")
    created: datetime | None = None
    activated: datetime | None = None
    status_changed: datetime | None = None
    last_login: datetime | None = None
    last_updated: datetime | None = None
    password_changed: datetime | None = None
    profile: UserProfile = Field(default_factory=UserProfile)
    credentials: UserCredentials | None = None
    links: dict[str, Any] | None = Field(default=None, alias="_links")

    def link(self, relation: str) -> str | None:
        """Return the href of a lifecycle/credential link (e.g. 'deactivate')."""
        if not self.links:
            return None
        entry = self.links.get(relation)
        if isinstance(entry, dict):
            return entry.get("href")
        return None
