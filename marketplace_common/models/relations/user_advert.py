# marketplace_common/models/relations/user_advert.py
from tortoise import fields

from marketplace_common.models.base import BaseModel
from marketplace_common.models.types.constants import PUBLIC_APP_LABEL


class UserAdvert(BaseModel):
    """用户广告关联表，position 记录追加顺序"""

    user = fields.ForeignKeyField(
        PUBLIC_APP_LABEL + ".User", related_name="advert_links", on_delete=fields.CASCADE, description="关联用户"
    )
    advert = fields.ForeignKeyField(
        PUBLIC_APP_LABEL + ".Advert", related_name="user_links", on_delete=fields.CASCADE, description="关联广告"
    )
    position = fields.IntField(description="在用户广告列表中的位置（从0开始）")

    class Meta:
        table = "mp_user_advert"
        table_description = "用户广告关系表"
        unique_together = [("user_id", "position")]

    def __str__(self):
        return f"用户({self.user_id})-广告({self.advert_id}) #{self.position}"
