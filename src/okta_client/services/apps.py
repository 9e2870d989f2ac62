"""Applications resource.

See: https://developer.okta.com/docs/api/resources/apps
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from okta_client.rate_limit.schemas import RateLimitCategory
from okta_client.schemas.app import APP_NAME_BOOKMARK, App
from okta_client.schemas.enums import AppSignOnMode

from .base import BaseService, path_segment

if TYPE_CHECKING:
    from okta_client.response import OktaResponse


class AppsService(BaseService):
    """Access to the Apps resource."""

    async def get_by_id(
        self, app_id: str, *, timeout: float | None = None
    ) -> tuple[App | None, OktaResponse]:
        """Fetch a single application by id.

        https://developer.okta.com/docs/api/resources/apps#get-application
        """
        return await self._client.execute(
            "GET",
            f"apps/{path_segment(app_id)}",
            category=RateLimitCategory.APPS_GET_UPDATE_DELETE,
            decode=App,
            timeout=timeout,
        )

    async def add(
        self,
        app: App,
        *,
        activate: bool = True,
        timeout: float | None = None,
    ) -> tuple[App | None, OktaResponse]:
        """Create an application. Most callers want a helper such as add_bookmark_app().

        https://developer.okta.com/docs/api/resources/apps#add-application
        """
        return await self._client.execute(
            "POST",
            f"apps?activate={str(activate).lower()}",
            body=app,
            category=RateLimitCategory.APPS_CREATE_LIST,
            decode=App,
            timeout=timeout,
        )

    async def add_bookmark_app(
        self,
        label: str,
        url: str,
        *,
        activate: bool = True,
        timeout: float | None = None,
    ) -> tuple[App | None, OktaResponse]:
        """Create a bookmark application pointing at url.

        https://developer.okta.com/docs/api/resources/apps#add-bookmark-application
        """
        app = App(
            name=APP_NAME_BOOKMARK,
            label=label,
            sign_on_mode=AppSignOnMode.BOOKMARK,
            settings={"app": {"requestIntegration": False, "url": url}},
        )
        return await self.add(app, activate=activate, timeout=timeout)
