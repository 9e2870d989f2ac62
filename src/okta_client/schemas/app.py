"""Pydantic schemas for Okta applications.

See: https://developer.okta.com/docs/api/resources/apps#application-model
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import OktaModel
from .enums import AppAuthenticationScheme, AppSignOnMode

APP_NAME_BOOKMARK = "bookmark"


class AppAccessibility(OktaModel):
    """Accessibility settings for the application."""

    self_service: bool | None = None
    error_redirect_url: str | None = None
    login_redirect_url: str | None = None


class AppVisibilityHide(OktaModel):
    ios: bool = Field(default=False, alias="iOS")
    web: bool = False


class AppVisibility(OktaModel):
    """Where the application is shown to end users."""

    auto_submit_toolbar: bool = False
    hide: AppVisibilityHide = Field(default_factory=AppVisibilityHide)


class AppUserNameTemplate(OktaModel):
    """Template used to generate a username when the app is assigned."""

    template: str | None = None
    type: str | None = Field(default=None, description="NONE, BUILT_IN or CUSTOM")
    user_suffix: str | None = None


class AppSigningCredential(OktaModel):
    kid: str | None = None


class AppOAuthCredential(OktaModel):
    """OAuth 2.0 client credentials (snake_case on the wire)."""

    client_id: str | None = Field(default=None, alias="client_id")
    client_secret: str | None = Field(default=None, alias="client_secret")
    token_endpoint_auth_method: str | None = Field(
        default=None, alias="token_endpoint_auth_method"
    )
    auto_key_rotation: bool | None = None


class AppPassword(OktaModel):
    value: str | None = None


class AppCredentials(OktaModel):
    """Credentials and scheme for the application's sign-on mode."""

    scheme: AppAuthenticationScheme | str | None = None
    user_name_template: AppUserNameTemplate | None = None
    signing: AppSigningCredential | None = None
    user_name: str | None = Field(default=None, alias="userName")
    password: AppPassword | None = None
    oauth_client: AppOAuthCredential | None = None


class App(OktaModel):
    """An Okta application."""

    id: str | None = Field(default=None, description="Unique application id")
    name: str | None = Field(default=None, description="Catalog app name (e.g. 'bookmark')")
    label: str | None = Field(default=None, description="User-visible label")
    created: datetime | None = None
    last_updated: datetime | None = None
    status: str | None = Field(default=None, description="ACTIVE or INACTIVE")
    features: list[str] | None = None
    sign_on_mode: AppSignOnMode | str | None = None
    accessibility: AppAccessibility | None = None
    visibility: AppVisibility | None = None
    credentials: AppCredentials | None = None
    settings: dict[str, Any] | None = None
    profile: dict[str, Any] | None = None
