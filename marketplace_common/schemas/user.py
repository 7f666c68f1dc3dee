# marketplace_common/schemas/user.py
from typing import Any, List, Optional

from pydantic import Field

from marketplace_common.schemas.base import CamelSchema


class UserCreate(CamelSchema):
    """创建用户的输入参数，messages/adverts 元素可为模型实例或ID"""

    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    email: Optional[str] = None
    picture_url: Optional[str] = None
    phone_number: Optional[str] = None
    messages: List[Any] = Field(default_factory=list)
    adverts: List[Any] = Field(default_factory=list)


class UserSettings(CamelSchema):
    """用户资料更新参数：仅非空值会覆盖原有字段"""

    email: Optional[str] = None
    phone_number: Optional[str] = None
    picture_url: Optional[str] = None
