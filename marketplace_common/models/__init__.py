# marketplace_common/models/__init__.py
from .types.constants import PUBLIC_APP_LABEL
from .advert import Advert
from .message import Message
from .user import User
from .relations import UserAdvert, UserMessage

__all__ = [
    "PUBLIC_APP_LABEL",
    "Advert",
    "Message",
    "User",
    "UserAdvert",
    "UserMessage",
]
