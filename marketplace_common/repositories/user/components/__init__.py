# marketplace_common/repositories/user/components/__init__.py
from .base import UserBaseComponent
from .profile import UserProfileComponent
from .relation import UserRelationComponent

__all__ = [
    "UserBaseComponent",
    "UserProfileComponent",
    "UserRelationComponent",
]
