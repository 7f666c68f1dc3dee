# marketplace_common/repositories/__init__.py
from .base_repository import BaseRepository, IRepository
from .user import UserRepository

__all__ = ["BaseRepository", "IRepository", "UserRepository"]
