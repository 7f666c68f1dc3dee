# marketplace_common/config/__init__.py
from .base import BaseConfig, CustomBaseConfig, DatabaseConfig, EncryptionConfig, LoggingConfig, TortoiseConfig

__all__ = [
    "BaseConfig",
    "CustomBaseConfig",
    "DatabaseConfig",
    "EncryptionConfig",
    "LoggingConfig",
    "TortoiseConfig",
]
