"""Enum definitions for Okta resource fields."""

from enum import StrEnum


class AppSignOnMode(StrEnum):
    """Application sign-on modes.

    See: https://developer.okta.com/docs/api/resources/apps#signon-modes
    """

    BOOKMARK = "BOOKMARK"
    BASIC_AUTH = "BASIC_AUTH"
    BROWSER_PLUGIN = "BROWSER_PLUGIN"
    SECURE_PASSWORD_STORE = "SECURE_PASSWORD_STORE"
    SAML_2_0 = "SAML_2_0"
    WS_FEDERATION = "WS_FEDERATION"
    AUTO_LOGIN = "AUTO_LOGIN"
    OPENID_CONNECT = "OPENID_CONNECT"
    CUSTOM = "Custom"


class AppAuthenticationScheme(StrEnum):
    """Credential schemes for an application's sign-on mode.

    See: https://developer.okta.com/docs/api/resources/apps#authentication-schemes
    """

    SHARED_USERNAME_AND_PASSWORD = "SHARED_USERNAME_AND_PASSWORD"
    EXTERNAL_PASSWORD_SYNC = "EXTERNAL_PASSWORD_SYNC"
    EDIT_USERNAME_AND_PASSWORD = "EDIT_USERNAME_AND_PASSWORD"
    EDIT_PASSWORD_ONLY = "EDIT_PASSWORD_ONLY"
    ADMIN_SETS_CREDENTIALS = "ADMIN_SETS_CREDENTIALS"
