# marketplace_common/models/user/__init__.py
from .model import User

__all__ = ["User"]
