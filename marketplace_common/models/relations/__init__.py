# marketplace_common/models/relations/__init__.py
from .user_advert import UserAdvert
from .user_message import UserMessage

__all__ = ["UserAdvert", "UserMessage"]
