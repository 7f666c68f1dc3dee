# marketplace_common/models/message/__init__.py
from .model import Message

__all__ = ["Message"]
