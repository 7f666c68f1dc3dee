# marketplace_common/schemas/message.py
from pydantic import Field

from marketplace_common.schemas.base import CamelSchema


class MessageCreate(CamelSchema):
    author: str = Field(min_length=1, max_length=50)
    content: str = Field(min_length=1)
