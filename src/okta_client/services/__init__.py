"""Resource services layered on the client pipeline."""

from .apps import AppsService
from .base import BaseService
from .groups import GroupsService
from .users import UsersService

__all__ = [
    "AppsService",
    "BaseService",
    "GroupsService",
    "UsersService",
]
