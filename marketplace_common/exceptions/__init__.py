# marketplace_common/exceptions/__init__.py
from .store import StoreError, translate_store_errors

__all__ = ["StoreError", "translate_store_errors"]
