# marketplace_common/repositories/user/__init__.py
from .repository import UserRepository

__all__ = ["UserRepository"]
