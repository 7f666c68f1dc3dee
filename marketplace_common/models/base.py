# marketplace_common/models/base.py
from uuid_extensions import uuid7
from tortoise import fields, models


class BaseModel(models.Model):
    """基础模型，包含通用字段"""

    # 主键（UUIDv7，按时间单调递增）
    id = fields.UUIDField(pk=True, default=uuid7)

    # 审计字段
    created_at = fields.DatetimeField(auto_now_add=True, description="创建时间")
    updated_at = fields.DatetimeField(auto_now=True, description="更新时间")

    class Meta:
        abstract = True

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.id}>"
