# marketplace_common/schemas/advert.py
from decimal import Decimal
from typing import Optional

from pydantic import Field

from marketplace_common.schemas.base import CamelSchema


class AdvertCreate(CamelSchema):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    city: Optional[str] = None
    picture_url: Optional[str] = None
