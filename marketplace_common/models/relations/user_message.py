# marketplace_common/models/relations/user_message.py
from tortoise import fields

from marketplace_common.models.base import BaseModel
from marketplace_common.models.types.constants import PUBLIC_APP_LABEL


class UserMessage(BaseModel):
    """用户消息关联表，position 记录追加顺序"""

    user = fields.ForeignKeyField(
        PUBLIC_APP_LABEL + ".User", related_name="message_links", on_delete=fields.CASCADE, description="关联用户"
    )
    message = fields.ForeignKeyField(
        PUBLIC_APP_LABEL + ".Message", related_name="user_links", on_delete=fields.CASCADE, description="关联消息"
    )
    position = fields.IntField(description="在用户消息列表中的位置（从0开始）")

    class Meta:
        table = "mp_user_message"
        table_description = "用户消息关系表"
        unique_together = [("user_id", "position")]

    def __str__(self):
        return f"用户({self.user_id})-消息({self.message_id}) #{self.position}"
