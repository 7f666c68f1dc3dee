# marketplace_common/models/advert/model.py
from tortoise import fields

from marketplace_common.models.base import BaseModel
from marketplace_common.utils.validators import validate_url


class Advert(BaseModel):
    """广告表 - 用户发布的分类信息"""

    title = fields.CharField(max_length=200, description="标题")
    description = fields.TextField(null=True, description="详细描述")
    price = fields.DecimalField(max_digits=12, decimal_places=2, null=True, description="价格")
    category = fields.CharField(max_length=50, null=True, description="分类", index=True)
    city = fields.CharField(max_length=100, null=True, description="所在城市", index=True)
    picture_url = fields.CharField(max_length=500, null=True, validators=[validate_url], description="图片URL")

    class Meta:
        table = "mp_advert"
        table_description = "广告表"

    def __str__(self) -> str:
        return self.title
