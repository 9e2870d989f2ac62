"""Users resource.

See: https://developer.okta.com/docs/api/resources/users
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from okta_client.rate_limit.schemas import RateLimitCategory
from okta_client.schemas.user import User

from .base import BaseService, path_segment

if TYPE_CHECKING:
    from okta_client.response import OktaResponse


class UsersService(BaseService):
    """Access to the Users resource."""

    async def get_by_id(
        self, user_id: str, *, timeout: float | None = None
    ) -> tuple[User | None, OktaResponse]:
        """Fetch a user by id ('me' resolves to the token's owner).

        https://developer.okta.com/docs/api/resources/users#get-user-with-id
        """
        return await self._client.execute(
            "GET",
            f"users/{path_segment(user_id)}",
            category=RateLimitCategory.USERS_GET_BY_ID,
            decode=User,
            timeout=timeout,
        )

    async def get_by_login(
        self, login: str, *, timeout: float | None = None
    ) -> tuple[User | None, OktaResponse]:
        """Fetch a user by login name.

        https://developer.okta.com/docs/api/resources/users#get-user-with-login
        """
        return await self._client.execute(
            "GET",
            f"users/{path_segment(login)}",
            category=RateLimitCategory.USERS_GET_BY_LOGIN_NAME,
            decode=User,
            timeout=timeout,
        )
