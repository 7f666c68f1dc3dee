# marketplace_common/schemas/__init__.py
from .advert import AdvertCreate
from .message import MessageCreate
from .user import UserCreate, UserSettings

__all__ = ["AdvertCreate", "MessageCreate", "UserCreate", "UserSettings"]
