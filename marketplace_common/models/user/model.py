# marketplace_common/models/user/model.py
from typing import TYPE_CHECKING, List

from tortoise import fields

from marketplace_common.models.base import BaseModel
from marketplace_common.utils.validators import validate_email, validate_phone_number, validate_url

if TYPE_CHECKING:
    from marketplace_common.models.advert.model import Advert
    from marketplace_common.models.message.model import Message
    from marketplace_common.models.relations.user_advert import UserAdvert
    from marketplace_common.models.relations.user_message import UserMessage


class User(BaseModel):
    """用户表 - 存储用户账户、联系方式与密码摘要"""

    # 账户信息（唯一性由调用方保证，此处仅建索引）
    username = fields.CharField(max_length=50, description="用户名", index=True)

    # 联系信息
    email = fields.CharField(max_length=100, null=True, validators=[validate_email], description="邮箱")
    phone_number = fields.CharField(
        max_length=30, null=True, validators=[validate_phone_number], description="电话号码"
    )

    # 用户资料
    picture_url = fields.CharField(max_length=500, null=True, validators=[validate_url], description="头像URL")

    # 密码（盐 + 盐值哈希；password 仅在开启 store_plain_password 时写入）
    salt = fields.CharField(max_length=128, description="密码盐")
    hash_pass = fields.CharField(max_length=256, description="密码哈希（十六进制）")
    password = fields.CharField(max_length=200, null=True, description="明文密码（兼容旧数据）")

    # 广告/消息关联（有序，只追加）
    advert_links: fields.ReverseRelation["UserAdvert"]
    message_links: fields.ReverseRelation["UserMessage"]

    class Meta:
        table = "mp_user"
        table_description = "用户表"
        indexes = [("username", "created_at")]

    def __str__(self) -> str:
        return f"{self.username} ({self.email or '-'})"

    # 展开后的关联对象（由仓储层 populate 赋值）
    @property
    def adverts(self) -> List["Advert"]:
        """已展开的广告列表（按追加顺序）"""
        try:
            return self._adverts
        except AttributeError:
            raise AttributeError(f"用户 {self.id} 的广告关联尚未展开，请通过仓储层读取") from None

    @adverts.setter
    def adverts(self, value: List["Advert"]):
        self._adverts = list(value)

    @property
    def messages(self) -> List["Message"]:
        """已展开的消息列表（按追加顺序）"""
        try:
            return self._messages
        except AttributeError:
            raise AttributeError(f"用户 {self.id} 的消息关联尚未展开，请通过仓储层读取") from None

    @messages.setter
    def messages(self, value: List["Message"]):
        self._messages = list(value)

    @property
    def is_populated(self) -> bool:
        """关联对象是否已展开"""
        return hasattr(self, "_adverts") and hasattr(self, "_messages")
