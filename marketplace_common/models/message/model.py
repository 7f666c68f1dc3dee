# marketplace_common/models/message/model.py
from tortoise import fields

from marketplace_common.models.base import BaseModel


class Message(BaseModel):
    """站内消息表"""

    author = fields.CharField(max_length=50, description="发送者用户名", index=True)
    content = fields.TextField(description="消息内容")
    is_read = fields.BooleanField(default=False, description="是否已读")

    class Meta:
        table = "mp_message"
        table_description = "站内消息表"

    def __str__(self) -> str:
        return f"{self.author}: {self.content[:20]}"
