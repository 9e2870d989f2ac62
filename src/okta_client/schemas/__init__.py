"""Pydantic schemas for Okta API resources and error bodies."""

from .app import (
    APP_NAME_BOOKMARK,
    App,
    AppAccessibility,
    AppCredentials,
    AppOAuthCredential,
    AppUserNameTemplate,
    AppVisibility,
)
from .base import OktaModel
from .enums import AppAuthenticationScheme, AppSignOnMode
from .error import ErrorCause, ErrorPayload
from .group import Group, GroupProfile
from .user import User, UserCredentials, UserProfile

__all__ = [
    "APP_NAME_BOOKMARK",
    "App",
    "AppAccessibility",
    "AppAuthenticationScheme",
    "AppCredentials",
    "AppOAuthCredential",
    "AppSignOnMode",
    "AppUserNameTemplate",
    "AppVisibility",
    "ErrorCause",
    "ErrorPayload",
    "Group",
    "GroupProfile",
    "OktaModel",
    "User",
    "UserCredentials",
    "UserProfile",
]
