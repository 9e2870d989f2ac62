"""Groups resource.

See: https://developer.okta.com/docs/api/resources/groups
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from okta_client.rate_limit.schemas import RateLimitCategory
from okta_client.schemas.group import Group

from .base import BaseService, path_segment

if TYPE_CHECKING:
    from okta_client.response import OktaResponse


class GroupsService(BaseService):
    """Access to the Groups resource."""

    async def get_by_id(
        self, group_id: str, *, timeout: float | None = None
    ) -> tuple[Group | None, OktaResponse]:
        """Fetch a single group by id.

        https://developer.okta.com/docs/api/resources/groups#get-group
        """
        return await self._client.execute(
            "GET",
            f"groups/{path_segment(group_id)}",
            category=RateLimitCategory.GROUPS_GET_UPDATE_DELETE,
            decode=Group,
            timeout=timeout,
        )
