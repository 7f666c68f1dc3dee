# marketplace_common/services/__init__.py
from .encryption_service import EncryptionService

__all__ = ["EncryptionService"]
