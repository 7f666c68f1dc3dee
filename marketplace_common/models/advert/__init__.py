# marketplace_common/models/advert/__init__.py
from .model import Advert

__all__ = ["Advert"]
